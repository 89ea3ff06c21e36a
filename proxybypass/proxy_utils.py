"""Proxy bypass decisions for HTTP clients."""

from typing import Callable, Dict, Optional

from .config import get_no_proxy_env, get_proxy_env
from .logging import logger
from .matching import extract_hostname
from .models import BypassList


class ProxyBypassEvaluator:
    """
    Decide whether a request should go through the forward proxy.

    The bypass list is pulled from ``source`` on every call, so an evaluator
    can be shared between threads and still see configuration changes.
    """

    def __init__(self, source: Optional[Callable[[], str]] = None):
        self.source = source or get_no_proxy_env

    def should_use_proxy(self, target: Optional[str], no_proxy: Optional[str] = None) -> bool:
        """
        Check a target against the NO_PROXY bypass list.

        Args:
            target: Full URL or bare host[:port] of the request destination
            no_proxy: Raw bypass list to use instead of the configured source

        Returns:
            True if the proxy should be used, False if the target matches a
            bypass entry and should be contacted directly
        """
        if not target:
            return True

        raw = self.source() if no_proxy is None else no_proxy
        if not raw or not raw.strip():
            return True

        bypass_list = BypassList.parse(raw)
        if bypass_list.contains_wildcard:
            logger.debug(f"NO_PROXY wildcard, bypassing proxy for {target}")
            return False

        hostname = extract_hostname(target)
        entry = bypass_list.first_match(hostname)
        if entry is not None:
            logger.debug(f"Host {hostname} matches NO_PROXY entry {entry.value!r}")
            return False

        return True


# Shared default instance reading NO_PROXY/no_proxy
default_evaluator = ProxyBypassEvaluator()


def should_use_proxy(target: Optional[str], no_proxy: Optional[str] = None) -> bool:
    """Module-level shortcut for the default evaluator."""
    return default_evaluator.should_use_proxy(target, no_proxy)


def should_bypass_proxy(url: Optional[str]) -> bool:
    """
    Determine if a URL should bypass proxy settings.

    Args:
        url: The target URL to check

    Returns:
        True if proxy should be bypassed, False otherwise
    """
    return not should_use_proxy(url)


def get_requests_proxies(url: str) -> Optional[Dict[str, Optional[str]]]:
    """
    Get proxy configuration for requests library.

    Args:
        url: The target URL to check

    Returns:
        Dictionary with proxy settings or None to bypass proxy
    """
    if should_bypass_proxy(url):
        # Explicitly disable proxy for this URL
        return {'http': None, 'https': None}

    # Return None to let requests use environment proxy settings
    return None


def get_httpx_trust_env(url: str) -> bool:
    """Determine if httpx should trust environment variables for proxy."""
    return should_use_proxy(url)


def mask_proxy_url(proxy: str) -> str:
    """Hide credentials in a proxy URL."""
    if '@' not in proxy:
        return proxy
    scheme, sep, rest = proxy.partition('://')
    host = proxy.split('@')[-1]
    if sep:
        return f"{scheme}://[CREDENTIALS]@{host}"
    return f"[CREDENTIALS]@{host}"


def log_proxy_decision(url: str, log=None) -> None:
    """
    Log the proxy decision for debugging.

    Args:
        url: The target URL
        log: Logger instance to use, defaults to the package logger
    """
    log = log or logger
    if should_bypass_proxy(url):
        log.debug(f"Bypassing proxy for URL: {url}")
        return

    proxy = get_proxy_env()
    if proxy:
        log.debug(f"Using proxy {mask_proxy_url(proxy)} for URL: {url}")
    else:
        log.debug(f"No proxy configured for URL: {url}")
