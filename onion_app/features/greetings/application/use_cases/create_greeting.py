"""
Create Greeting Use Case
========================

Business use case for creating and storing a new greeting.
"""
import logging

from onion_app.features.greetings.application.dto.greeting_dto import GreetingResponse
from onion_app.features.greetings.domain.models.greeting import Greeting
from onion_app.features.greetings.domain.repositories.greeting_repository import GreetingRepository
from onion_app.features.greetings.domain.value_objects import PersonName

logger = logging.getLogger(__name__)


class CreateGreetingUseCase:
    """
    Use case for creating a greeting.

    Validation → entity construction → persistence → response shaping.
    """

    def __init__(self, greeting_repository: GreetingRepository):
        """
        Initialize use case with repository.

        Args:
            greeting_repository: Repository for greeting persistence
        """
        self._repository = greeting_repository

    async def execute(self, name: str) -> GreetingResponse:
        """
        Execute the create greeting use case.

        Args:
            name: Raw name supplied by the caller

        Returns:
            Response shape of the stored greeting

        Raises:
            ValidationError: If the name is invalid (nothing is stored)
            PersistenceError: If storing the greeting fails
        """
        person_name = PersonName(name)
        greeting = Greeting.create_new(person_name)

        saved = await self._repository.save(greeting)
        logger.debug(f"Greeting {saved.id} created for '{saved.name}'")

        return GreetingResponse.from_entity(saved)
