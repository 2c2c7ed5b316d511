import pytest

from securemongo.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Settings are cached per process; each test sees its own environment."""
    for name in (
        "MONGO_URI",
        "MONGO_AUTH_MECHANISM",
        "MONGO_TLS_ENABLED",
        "MONGO_TLS_CA_FILE",
        "MONGO_TLS_CERTIFICATE_KEY_FILE",
        "MONGO_TLS_CERTIFICATE_KEY_FILE_PASSWORD",
        "MONGO_TLS_ALLOW_INVALID_CERTIFICATES",
        "MONGO_TLS_ALLOW_INVALID_HOSTNAMES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
