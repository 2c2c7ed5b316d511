"""Secure and insecure MongoDB dial entry points."""

from pymongo.errors import PyMongoError

from securemongo.config.logging import get_logger
from securemongo.config.storage.models import TLSConfig
from securemongo.config.storage.mongo import get_mongo_config
from securemongo.resources.mongo.client import dial_with_info
from securemongo.resources.mongo.dial_info import DialConfiguration, parse_url
from securemongo.resources.mongo.session import Session
from securemongo.services.auth.mechanisms import AuthMechanism, parse_auth_mechanism
from securemongo.services.transport.base import BaseTransportOpener
from securemongo.services.transport.strategies.tcp_strategy import TCPTransportOpener
from securemongo.services.transport.strategies.tls_strategy import TLSTransportOpener

logger = get_logger(__name__)

DIAL_TIMEOUT_SECONDS = 5.0


def assemble_dial_info(
    connection_string: str,
    mechanism: AuthMechanism,
    transport: BaseTransportOpener | None,
) -> DialConfiguration:
    """
    Parse `connection_string` and prepare it for dialing: install the transport,
    fix the timeout, clear URI credentials when mechanism is NONE and stamp the
    mechanism label.
    """
    config = parse_url(connection_string)
    config.transport = transport
    config.timeout = DIAL_TIMEOUT_SECONDS
    if mechanism == AuthMechanism.NONE:
        config.username = ""
        config.password = ""
    config.mechanism = str(mechanism)
    return config


def _dial(config: DialConfiguration) -> Session:
    fields = {
        "hosts": [f"{host}:{port}" for host, port in config.addresses],
        "mechanism": config.mechanism or "none",
        "transport": config.transport.transport_name if config.transport else "default",
    }
    logger.info("MongoDB dial starting", extra=fields)
    try:
        session = dial_with_info(config)
    except (PyMongoError, ValueError) as e:
        logger.warning("MongoDB dial failed", extra={**fields, "error_type": type(e).__name__})
        raise
    logger.info("MongoDB dial succeeded", extra=fields)
    return session


def dial(connection_string: str, mechanism: AuthMechanism, tls_config: TLSConfig) -> Session:
    """
    Dial a MongoDB server over TLS.

    `connection_string` is a URI as given to the mongo shell, `mechanism` the
    authentication mechanism to request (see AuthMechanism) and `tls_config` the
    TLS settings every server connection is opened with.
    """
    config = assemble_dial_info(connection_string, mechanism, TLSTransportOpener(tls_config))
    return _dial(config)


def dial_insecure(connection_string: str, mechanism: AuthMechanism) -> Session:
    """
    Dial a MongoDB server without TLS.

    Nothing placed on the wire is encrypted, authentication details included.
    """
    config = assemble_dial_info(connection_string, mechanism, TCPTransportOpener())
    logger.warning(
        "Dialing MongoDB without TLS; credentials are sent in cleartext",
        extra={"mechanism": config.mechanism or "none"},
    )
    return _dial(config)


def dial_from_settings() -> Session:
    """Dial using MONGO_* settings. Raises UnrecognizedMechanismError for a bad MONGO_AUTH_MECHANISM."""
    cfg = get_mongo_config()
    mechanism = parse_auth_mechanism(cfg["auth_mechanism"])
    if cfg["tls_enabled"]:
        return dial(cfg["uri"], mechanism, cfg["tls"])
    return dial_insecure(cfg["uri"], mechanism)
