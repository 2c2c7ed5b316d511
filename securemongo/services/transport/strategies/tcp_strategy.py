"""Plain TCP transport. Nothing on the wire is encrypted, credentials included."""

import socket
from typing import Any

from securemongo.services.transport.base import BaseTransportOpener, ServerAddress


class TCPTransportOpener(BaseTransportOpener):
    """Unencrypted TCP connections; the driver is told to keep TLS off."""

    @property
    def transport_name(self) -> str:
        return "tcp"

    def open(self, address: ServerAddress, timeout: float) -> socket.socket:
        host, port = address
        return socket.create_connection((host, port), timeout=timeout)

    def client_options(self) -> dict[str, Any]:
        return {"tls": False}
