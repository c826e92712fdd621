"""
MongoDB Connection
==================

Process-wide MongoDB client cache.

The client is created lazily on first use and reused for the lifetime
of the process. Settings come from app configuration (MONGO_URI, DB_NAME).
"""
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.collection import Collection

from employee_manager.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    Singleton MongoDB client manager.

    Manages the MongoDB connection and provides access to collections.
    """
    _instance: Optional["MongoClientManager"] = None
    _client: Optional[MongoClient] = None
    _database: Optional[Database] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def _initialize_client(self) -> None:
        """Initialize MongoDB client connection."""
        if self._client is not None:
            return  # Already initialized

        settings = get_settings()
        self._client = MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
        self._database = self._client[settings.mongo_database_name]
        logger.info("MongoDB client created for database '%s'", settings.mongo_database_name)

    @property
    def is_connected(self) -> bool:
        """True once a client handle has been cached."""
        return self._client is not None

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
        """Close MongoDB connection. The next access reconnects."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB client closed")


def get_mongo_client() -> MongoClientManager:
    """Get singleton MongoDB client manager."""
    return MongoClientManager()
