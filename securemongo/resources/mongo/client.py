"""Driver adapter: turns a DialConfiguration into a connected pymongo MongoClient."""

from typing import Any
from urllib.parse import quote_plus

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from securemongo.config.logging import get_logger
from securemongo.resources.mongo.dial_info import DialConfiguration
from securemongo.resources.mongo.session import Session

logger = get_logger(__name__)

# Set from DialConfiguration fields, never copied from the URI
_CONTROLLED_OPTIONS = frozenset({"authmechanism", "connecttimeoutms", "serverselectiontimeoutms"})
# Only meaningful alongside a username
_CREDENTIAL_OPTIONS = frozenset({"authsource", "authmechanismproperties"})
# Mechanisms that authenticate against the URI database rather than $external
_DATABASE_SOURCED_MECHANISMS = frozenset({"", "SCRAM-SHA-1", "MONGODB-CR"})


def _format_seed(address: tuple[str, int | None]) -> str:
    host, port = address
    if host.endswith(".sock"):
        return quote_plus(host)
    if ":" in host:
        host = f"[{host}]"
    return host if port is None else f"{host}:{port}"


def _forwarded_options(config: DialConfiguration) -> dict[str, Any]:
    """URI options passed through as-is; the transport alone decides tls/ssl."""
    out: dict[str, Any] = {}
    for name, value in config.options.items():
        key = name.lower()
        if key in _CONTROLLED_OPTIONS or key.startswith(("tls", "ssl")):
            continue
        if key in _CREDENTIAL_OPTIONS and not config.username:
            continue
        if key == "authmechanismproperties" and not config.mechanism:
            continue
        out[name] = value
    return out


def build_client_options(config: DialConfiguration) -> dict[str, Any]:
    """
    Keyword arguments for MongoClient equivalent to `config`.
    Without a username no credential is built, so the mechanism label is not sent.
    """
    opts = _forwarded_options(config)
    opts["host"] = [_format_seed(address) for address in config.addresses]
    if config.username:
        opts["username"] = config.username
        opts["password"] = config.password
        if (
            config.database
            and "authsource" not in opts
            and config.mechanism in _DATABASE_SOURCED_MECHANISMS
        ):
            opts["authSource"] = config.database
        if config.mechanism:
            opts["authMechanism"] = config.mechanism
    if config.timeout is not None:
        timeout_ms = int(config.timeout * 1000)
        opts["connectTimeoutMS"] = timeout_ms
        opts["serverSelectionTimeoutMS"] = timeout_ms
    if config.transport is not None:
        opts.update(config.transport.client_options())
    return opts


def dial_with_info(config: DialConfiguration) -> Session:
    """
    Build the client and force a round trip so the caller gets a live session or an error.
    Driver errors (ConfigurationError, ConnectionFailure, OperationFailure) propagate unchanged.
    An authMechanism pymongo does not support is rejected with ValueError.
    """
    client: MongoClient = MongoClient(**build_client_options(config))
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        raise
    logger.debug("MongoDB client connected", extra={"database": config.database})
    return Session(client, config.database)
