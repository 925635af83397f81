"""
Greetings Feature
=================

Registers storage, services and startup initialization for greetings.
"""
import logging
from typing import TYPE_CHECKING

from onion_app.core.config import AppSettings
from onion_app.di.feature import Feature, RuntimeContext
from onion_app.features.greetings.application.services.greeting_service import GreetingService
from onion_app.features.greetings.domain.repositories.greeting_repository import GreetingRepository
from onion_app.features.greetings.infrastructure.db.mongo_greeting_repository import MongoGreetingRepository
from onion_app.infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from onion_app.di.base_container import BaseContainer

logger = logging.getLogger(__name__)

# Registry key of this feature's storage connection
GREETINGS_DATABASE = "greetings.database"


class GreetingsFeature(Feature):
    """Greeting resources backed by MongoDB."""

    name = "Greetings"
    settings_key = "greetings"

    def register_storage(self, container: "BaseContainer", settings: AppSettings) -> None:
        """
        Register the MongoDB connection for greetings.
        A second call keeps the already registered connection.
        """
        if container.has(GREETINGS_DATABASE):
            return

        connection_string = settings.connection_string(self.settings_key)
        container.register_singleton(
            GREETINGS_DATABASE,
            MongoConnection(connection_string, default_database=self.settings_key),
        )
        if settings.detailed_errors:
            logger.debug(f"Greetings storage: {connection_string}")

    def register_services(self, container: "BaseContainer", settings: AppSettings) -> None:
        """
        Register repository and service factories.
        Each resolution builds new instances (one per request).
        """
        def repository_factory() -> GreetingRepository:
            connection: MongoConnection = container.get(GREETINGS_DATABASE)
            return MongoGreetingRepository(
                connection.get_collection(MongoGreetingRepository.COLLECTION_NAME)
            )

        container.register_factory(GreetingRepository, repository_factory)
        container.register_factory(
            GreetingService,
            lambda: GreetingService(greeting_repository=container.get(GreetingRepository)),
        )

    async def initialize(self, container: "BaseContainer", context: RuntimeContext) -> None:
        """
        Ensure the greetings collection indexes exist.
        Works on this feature's own storage, whatever GreetingRepository is bound to.
        """
        connection: MongoConnection = container.get(GREETINGS_DATABASE)
        repository = MongoGreetingRepository(
            connection.get_collection(MongoGreetingRepository.COLLECTION_NAME)
        )
        await repository.ensure_indexes()
        logger.debug(f"Greetings storage ready ({context.environment})")
