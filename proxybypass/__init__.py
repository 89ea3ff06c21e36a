"""NO_PROXY-aware proxy bypass decisions."""

from .models import BypassEntry, BypassList, EntryKind
from .proxy_utils import (
    ProxyBypassEvaluator,
    get_httpx_trust_env,
    get_requests_proxies,
    log_proxy_decision,
    should_bypass_proxy,
    should_use_proxy,
)

__all__ = [
    "BypassEntry",
    "BypassList",
    "EntryKind",
    "ProxyBypassEvaluator",
    "get_httpx_trust_env",
    "get_requests_proxies",
    "log_proxy_decision",
    "should_bypass_proxy",
    "should_use_proxy",
]
