"""
MongoDB Connection
==================

Lazily created asyncio MongoDB client bound to one connection string.
Each feature registers its own MongoConnection during storage wiring.
"""
import logging
from typing import Optional

from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    MongoDB client manager for one connection string.

    The client is created on first use; pymongo connects in the background
    and pools connections, so one instance is shared across requests.
    """

    def __init__(self, connection_string: str, default_database: str) -> None:
        """
        Args:
            connection_string: MongoDB URI; a database in the URI path wins
            default_database: Database used when the URI names none
        """
        self.connection_string = connection_string
        self.default_database = default_database
        self._client: Optional[AsyncMongoClient] = None
        self._database: Optional[AsyncDatabase] = None

    def _initialize_client(self) -> None:
        """Initialize MongoDB client."""
        if self._client is not None:
            return

        self._client = AsyncMongoClient(self.connection_string, tz_aware=True)
        self._database = self._client.get_default_database(self.default_database)
        logger.info(f"MongoDB client created for database: {self._database.name}")

    def get_database(self) -> AsyncDatabase:
        """Get MongoDB database instance."""
        if self._database is None:
            self._initialize_client()
        return self._database

    def get_collection(self, collection_name: str) -> AsyncCollection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB AsyncCollection object
        """
        return self.get_database()[collection_name]

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._database = None
