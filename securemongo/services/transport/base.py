"""Base transport opener contract: how the driver reaches each server address."""

import socket
from abc import ABC, abstractmethod
from typing import Any

ServerAddress = tuple[str, int]


class BaseTransportOpener(ABC):
    """
    Abstract transport opener. An opener produces the low-level connection for one
    server address and tells the driver, through client_options(), which transport
    to use for every connection it opens itself.
    """

    @abstractmethod
    def open(self, address: ServerAddress, timeout: float) -> socket.socket:
        """
        Open a connection to `address` directly. pymongo never calls this; it opens its
        own sockets from client_options(). Socket and TLS errors propagate unchanged.
        """
        ...

    @abstractmethod
    def client_options(self) -> dict[str, Any]:
        """pymongo keyword options selecting this transport."""
        ...

    @property
    @abstractmethod
    def transport_name(self) -> str:
        """Transport identifier, e.g. 'tcp', 'tls'."""
        ...
