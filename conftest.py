import pytest

PROXY_ENV_VARS = ("NO_PROXY", "no_proxy", "HTTP_PROXY", "http_proxy")


@pytest.fixture(autouse=True)
def clean_proxy_env(monkeypatch):
    """Start every test without proxy configuration in the environment."""
    for key in PROXY_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
