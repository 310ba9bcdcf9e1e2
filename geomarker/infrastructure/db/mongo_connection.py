"""
MongoDB Connection
==================

MongoDB client manager for database connections.

One manager is built per application instance by the DI container and
closed when the application shuts down.
"""
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection

from geomarker.core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB client manager.

    Manages a MongoDB connection and provides access to collections.
    The underlying client connects lazily on first use.
    """

    def __init__(self, settings: Settings, client: Optional[MongoClient] = None) -> None:
        self._settings = settings
        self._client: Optional[MongoClient] = client
        self._database: Optional[Database] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is None:
            self._client = MongoClient(
                self._settings.mongo_uri,
                retryWrites=True,
                w="majority",
                serverSelectionTimeoutMS=self._settings.mongo_server_selection_timeout_ms,
            )
        self._database = self._client[self._settings.mongo_database_name]
        logger.info("MongoDB client ready for database '%s'", self._settings.mongo_database_name)

    def get_database(self) -> Database:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        database = self.get_database()
        return database[collection_name]

    def close(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")
