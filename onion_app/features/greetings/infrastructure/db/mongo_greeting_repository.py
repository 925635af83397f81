"""
MongoDB Greeting Repository
===========================

Concrete implementation of GreetingRepository using MongoDB.
"""
import logging
from typing import List, Optional
from uuid import UUID

from pymongo import ASCENDING
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.collation import Collation
from pymongo.errors import PyMongoError

from onion_app.core.errors import PersistenceError, ValidationError
from onion_app.features.greetings.domain.constants.greeting_fields import GreetingFields
from onion_app.features.greetings.domain.models.greeting import Greeting
from onion_app.features.greetings.domain.repositories.greeting_repository import GreetingRepository
from onion_app.features.greetings.domain.value_objects import MessageText, PersonName

logger = logging.getLogger(__name__)

# Strength 2 compares base letters and accents but ignores case
NAME_COLLATION = Collation(locale="en", strength=2)


class MongoGreetingRepository(GreetingRepository):
    """
    MongoDB implementation of GreetingRepository.

    Documents have the shape {id, name, message, created_at}; the id is the
    string form of the greeting UUID and carries a unique index.
    """

    COLLECTION_NAME = "greetings"

    def __init__(self, collection: AsyncCollection):
        """
        Initialize repository with a MongoDB collection.

        Args:
            collection: Collection holding greeting documents
        """
        self._collection = collection

    def _to_entity(self, doc: dict) -> Greeting:
        """Convert MongoDB document to Greeting entity."""
        record_id = doc.get(GreetingFields.ID)
        try:
            return Greeting.reconstruct(
                id=record_id,
                name=PersonName(doc[GreetingFields.NAME]),
                message=MessageText(doc[GreetingFields.MESSAGE]),
                created_at=doc[GreetingFields.CREATED_AT],
            )
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            raise PersistenceError(f"Stored greeting '{record_id}' is invalid: {e}") from e

    def _to_document(self, greeting: Greeting) -> dict:
        """Convert Greeting entity to MongoDB document."""
        return {
            GreetingFields.ID: str(greeting.id),
            GreetingFields.NAME: greeting.name.value,
            GreetingFields.MESSAGE: greeting.message.value,
            GreetingFields.CREATED_AT: greeting.created_at,
        }

    async def save(self, greeting: Greeting) -> Greeting:
        """Insert a new greeting."""
        doc = self._to_document(greeting)
        try:
            await self._collection.insert_one(doc)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to save greeting '{greeting.id}': {e}") from e
        return greeting

    async def get_by_id(self, greeting_id: UUID) -> Optional[Greeting]:
        """Find a greeting by its ID."""
        try:
            doc = await self._collection.find_one(
                {GreetingFields.ID: str(greeting_id)},
                projection={GreetingFields.MONGO_ID: False},
            )
        except PyMongoError as e:
            raise PersistenceError(f"Failed to load greeting '{greeting_id}': {e}") from e

        if not doc:
            return None
        return self._to_entity(doc)

    async def get_all(self) -> List[Greeting]:
        """Find all greetings, oldest first."""
        cursor = self._collection.find(
            {},
            projection={GreetingFields.MONGO_ID: False},
        ).sort(GreetingFields.CREATED_AT, ASCENDING)
        return await self._collect(cursor)

    async def get_by_name(self, name: str) -> List[Greeting]:
        """Find greetings by name (case-insensitive), oldest first."""
        cursor = self._collection.find(
            {GreetingFields.NAME: name},
            projection={GreetingFields.MONGO_ID: False},
            collation=NAME_COLLATION,
        ).sort(GreetingFields.CREATED_AT, ASCENDING)
        return await self._collect(cursor)

    async def _collect(self, cursor) -> List[Greeting]:
        try:
            docs = await cursor.to_list(None)
        except PyMongoError as e:
            raise PersistenceError(f"Failed to query greetings: {e}") from e
        return [self._to_entity(doc) for doc in docs]

    async def ensure_indexes(self) -> None:
        """Create the unique id index and the name / created_at lookup indexes."""
        try:
            await self._collection.create_index(
                [(GreetingFields.ID, ASCENDING)], unique=True, name="ix_greetings_id"
            )
            await self._collection.create_index(
                [(GreetingFields.NAME, ASCENDING)], collation=NAME_COLLATION, name="ix_greetings_name"
            )
            await self._collection.create_index(
                [(GreetingFields.CREATED_AT, ASCENDING)], name="ix_greetings_created_at"
            )
        except PyMongoError as e:
            raise PersistenceError(f"Failed to create greeting indexes: {e}") from e
        logger.info(f"Indexes ensured on collection '{self.COLLECTION_NAME}'")
