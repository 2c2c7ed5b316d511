"""MongoDB dial config (read from settings). Read-only; no dialing here."""

from securemongo.config.settings import get_settings
from securemongo.config.storage.models import TLSConfig


def get_tls_config() -> TLSConfig:
    """Build the TLS configuration described by settings."""
    s = get_settings()
    return TLSConfig(
        ca_file=s.mongo_tls_ca_file,
        certificate_key_file=s.mongo_tls_certificate_key_file,
        certificate_key_file_password=s.mongo_tls_certificate_key_file_password,
        allow_invalid_certificates=s.mongo_tls_allow_invalid_certificates,
        allow_invalid_hostnames=s.mongo_tls_allow_invalid_hostnames,
    )


def get_mongo_config() -> dict:
    """Return MongoDB dial parameters from settings for use by the dialer."""
    s = get_settings()
    return {
        "uri": s.mongo_uri,
        "auth_mechanism": s.mongo_auth_mechanism,
        "tls_enabled": s.mongo_tls_enabled,
        "tls": get_tls_config() if s.mongo_tls_enabled else None,
    }
