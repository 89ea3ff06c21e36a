"""
HTTP client factories that honour NO_PROXY per target.

requests and httpx apply their own proxy environment handling; these
helpers only switch it off for targets on the bypass list. No connection
is opened here.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

import httpx
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .logging import logger
from .proxy_utils import get_httpx_trust_env, get_requests_proxies

DEFAULT_TIMEOUT: Tuple[float, float] = (5.0, 180.0)


def _retry_adapter(max_retries: int) -> HTTPAdapter:
    retry = Retry(
        total=max_retries,
        backoff_factor=0.3,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["HEAD", "GET", "PUT", "DELETE", "OPTIONS", "TRACE", "POST"],
    )
    return HTTPAdapter(max_retries=retry)


def create_sync_session(url: str, max_retries: int = 3) -> requests.Session:
    """
    Create a requests session for talking to ``url``.

    Args:
        url: Target the session will be used for
        max_retries: Retry budget for the mounted adapters

    Returns:
        Session with ``trust_env`` disabled when the target bypasses the proxy
    """
    session = requests.Session()
    session.trust_env = get_httpx_trust_env(url)

    adapter = _retry_adapter(max_retries)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    if not session.trust_env:
        logger.debug(f"requests session for {url} ignores environment proxies")
    return session


def request_kwargs(url: str, **kwargs: Any) -> Dict[str, Any]:
    """Build keyword arguments for ``requests.request`` targeting ``url``."""
    kwargs.setdefault("timeout", DEFAULT_TIMEOUT)
    proxies = get_requests_proxies(url)
    if proxies is not None:
        kwargs["proxies"] = proxies
    return kwargs


def create_sync_client(url: str, **kwargs: Any) -> httpx.Client:
    """Create an httpx client whose ``trust_env`` follows the bypass decision."""
    kwargs.setdefault("trust_env", get_httpx_trust_env(url))
    return httpx.Client(**kwargs)


def create_async_client(url: str, **kwargs: Any) -> httpx.AsyncClient:
    """Async counterpart of :func:`create_sync_client`."""
    kwargs.setdefault("trust_env", get_httpx_trust_env(url))
    kwargs.setdefault("timeout", httpx.Timeout(connect=10.0, read=300.0, write=10.0, pool=10.0))
    return httpx.AsyncClient(**kwargs)
