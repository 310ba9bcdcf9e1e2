from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MONGO_CONNECTION_KEY = "mongo_connection"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all database connections in the container.
        This is the ONLY place where database connections are registered.
        Only the MongoDB backend needs a connection; the memory backend has none.
        """
        settings = container.get(Settings)
        if settings.storage_backend != "mongo":
            return

        # Connection is lazy; nothing talks to the server until first use
        container.register_singleton(MONGO_CONNECTION_KEY, MongoConnection(settings))
