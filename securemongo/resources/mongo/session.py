"""Live MongoDB session. Thin wrapper over the client for default database, health and lifecycle."""

from typing import Any

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from securemongo.config.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DATABASE = "test"


class Session:
    """Connected client plus the database named in the connection string."""

    def __init__(self, client: MongoClient, database_name: str | None = None):
        self.client = client
        self.database_name = database_name or DEFAULT_DATABASE

    @property
    def database(self) -> Database:
        return self.client[self.database_name]

    def ping(self) -> dict[str, Any]:
        """
        Ping the server. Returns dict with 'ok' bool and optional 'error' string.
        Used for health checks; does not leak internal details.
        """
        try:
            self.client.admin.command("ping")
            return {"ok": True, "error": None}
        except ServerSelectionTimeoutError as e:
            logger.warning("MongoDB ping timeout", extra={"error": type(e).__name__})
            return {"ok": False, "error": "connection_timeout"}
        except PyMongoError as e:
            logger.warning("MongoDB ping failed", extra={"error": type(e).__name__})
            return {"ok": False, "error": "connection_failed"}

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
