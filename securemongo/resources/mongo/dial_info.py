"""Parsed MongoDB connection string: the record the driver adapter dials with."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pymongo.uri_parser import parse_uri

from securemongo.services.transport.base import BaseTransportOpener


class DialConfiguration(BaseModel):
    """
    Everything needed for one dial. Built fresh per call and handed straight to
    dial_with_info; fields are mutable so the dialer can adjust them first.
    `options` holds the remaining URI query options keyed by lower-cased name.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # port is None for unix domain sockets
    addresses: list[tuple[str, int | None]] = Field(default_factory=list)
    database: str | None = Field(default=None, description="Database path component of the URI")
    username: str = Field(default="")
    password: str = Field(default="")
    mechanism: str = Field(default="", description="Authentication mechanism label; empty for none")
    timeout: float | None = Field(default=None, description="Connect and server selection timeout (s)")
    transport: BaseTransportOpener | None = Field(default=None)
    options: dict[str, Any] = Field(default_factory=dict)


def parse_url(connection_string: str) -> DialConfiguration:
    """
    Parse a mongodb:// or mongodb+srv:// URI. Parser errors (InvalidURI,
    ConfigurationError) propagate unchanged. Option values are left as written;
    the driver validates them when the client is built.
    """
    res = parse_uri(connection_string, validate=False)
    options = {str(name).lower(): value for name, value in res["options"].items()}
    mechanism = options.pop("authmechanism", "")
    return DialConfiguration(
        addresses=[(host, port) for host, port in res["nodelist"]],
        database=res["database"],
        username=res["username"] or "",
        password=res["password"] or "",
        mechanism=mechanism,
        options=options,
    )
