import logging

from securemongo.config.logging import configure_logging, get_logger, log_extra
from securemongo.config.settings import get_settings
from securemongo.config.storage.mongo import get_mongo_config


def test_defaults():
    s = get_settings()
    assert s.mongo_uri == "mongodb://localhost:27017"
    assert s.mongo_auth_mechanism == ""
    assert s.mongo_tls_enabled is True
    cfg = get_mongo_config()
    assert cfg["tls"].ca_file is None
    assert cfg["tls"].allow_invalid_certificates is False


def test_tls_disabled_yields_no_tls_config(monkeypatch):
    monkeypatch.setenv("MONGO_TLS_ENABLED", "0")
    cfg = get_mongo_config()
    assert cfg["tls_enabled"] is False
    assert cfg["tls"] is None


def test_tls_settings_reach_tls_config(monkeypatch):
    monkeypatch.setenv("MONGO_TLS_CA_FILE", "/etc/ssl/ca.pem")
    monkeypatch.setenv("MONGO_TLS_CERTIFICATE_KEY_FILE", "/etc/ssl/client.pem")
    monkeypatch.setenv("MONGO_TLS_ALLOW_INVALID_CERTIFICATES", "true")
    tls = get_mongo_config()["tls"]
    assert tls.ca_file == "/etc/ssl/ca.pem"
    assert tls.certificate_key_file == "/etc/ssl/client.pem"
    assert tls.allow_invalid_certificates is True


def test_configure_logging_uses_level_and_quiets_driver(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert logging.getLogger("pymongo").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_logger_helpers():
    assert get_logger("securemongo.x").name == "securemongo.x"
    assert log_extra({"a": 1}) == {"extra": {"a": 1}}
