"""
Greeting Service
================

Application service that coordinates greeting-related operations.
This is the entry point used by the transport layer.
"""
from typing import List, Optional
from uuid import UUID

from onion_app.features.greetings.application.dto.greeting_dto import GreetingResponse
from onion_app.features.greetings.application.use_cases.create_greeting import CreateGreetingUseCase
from onion_app.features.greetings.domain.repositories.greeting_repository import GreetingRepository


class GreetingService:
    """
    Application service for greeting operations.

    Writes go through CreateGreetingUseCase; reads pass through to the
    repository and are mapped to response DTOs.
    """

    def __init__(self, greeting_repository: GreetingRepository):
        """
        Initialize service with repository.

        Args:
            greeting_repository: Repository for greeting persistence
        """
        self._repository = greeting_repository
        self._create_use_case = CreateGreetingUseCase(greeting_repository)

    async def create_greeting(self, name: str) -> GreetingResponse:
        """
        Create a greeting for a name.

        Raises:
            ValidationError: If the name is empty, whitespace or too long
        """
        return await self._create_use_case.execute(name)

    async def get_greeting(self, greeting_id: UUID) -> Optional[GreetingResponse]:
        """
        Get a greeting by ID.

        Returns:
            Greeting response if found, None otherwise
        """
        greeting = await self._repository.get_by_id(greeting_id)
        return GreetingResponse.from_entity(greeting) if greeting is not None else None

    async def list_greetings(self) -> List[GreetingResponse]:
        """List all greetings, oldest first."""
        greetings = await self._repository.get_all()
        return [GreetingResponse.from_entity(g) for g in greetings]

    async def find_greetings_by_name(self, name: str) -> List[GreetingResponse]:
        """Find greetings for a name (case-insensitive), oldest first."""
        greetings = await self._repository.get_by_name(name.strip())
        return [GreetingResponse.from_entity(g) for g in greetings]
