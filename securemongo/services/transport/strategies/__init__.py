"""Transport opener implementations."""

from securemongo.config.storage.models import TLSConfig
from securemongo.services.transport.base import BaseTransportOpener
from securemongo.services.transport.strategies.tcp_strategy import TCPTransportOpener
from securemongo.services.transport.strategies.tls_strategy import TLSTransportOpener

TRANSPORT_REGISTRY: dict[str, type[BaseTransportOpener]] = {
    "tcp": TCPTransportOpener,
    "tls": TLSTransportOpener,
}


def get_transport_opener(
    transport_name: str, tls_config: TLSConfig | None = None
) -> BaseTransportOpener | None:
    """Return an opener for the given transport name, or None. 'tls' defaults to TLSConfig()."""
    cls = TRANSPORT_REGISTRY.get(transport_name)
    if cls is None:
        return None
    if cls is TLSTransportOpener:
        return TLSTransportOpener(tls_config or TLSConfig())
    return cls()
