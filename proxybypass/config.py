"""Environment configuration for proxy decisions."""

import os
from typing import Optional

# Upper-case first, lower-case fallback
NO_PROXY_ENV_VARS = ("NO_PROXY", "no_proxy")
HTTP_PROXY_ENV_VARS = ("HTTP_PROXY", "http_proxy")


def _first_env(names) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def get_no_proxy_env() -> str:
    """
    Get the raw bypass list from the environment.
    Reads dynamically to support runtime changes.
    An empty NO_PROXY falls through to no_proxy.
    """
    return _first_env(NO_PROXY_ENV_VARS) or ""


def get_proxy_env() -> Optional[str]:
    """Get the configured HTTP proxy URL, if any."""
    return _first_env(HTTP_PROXY_ENV_VARS)
