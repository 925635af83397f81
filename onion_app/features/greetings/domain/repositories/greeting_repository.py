"""
Greeting Repository Interface
=============================

Abstract interface for greeting data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from onion_app.features.greetings.domain.models.greeting import Greeting


class GreetingRepository(ABC):
    """
    Abstract repository for greeting persistence operations.

    All methods are coroutines. Cancelling the awaiting task aborts the
    underlying I/O and propagates asyncio.CancelledError; storage failures
    are raised as PersistenceError.
    """

    @abstractmethod
    async def save(self, greeting: Greeting) -> Greeting:
        """
        Insert a new greeting.

        Args:
            greeting: Greeting entity to store

        Returns:
            Stored greeting entity
        """
        pass

    @abstractmethod
    async def get_by_id(self, greeting_id: UUID) -> Optional[Greeting]:
        """
        Find a greeting by its ID.

        Args:
            greeting_id: Unique greeting identifier

        Returns:
            Greeting entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Greeting]:
        """
        Find all greetings.

        Returns:
            List of greeting entities ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> List[Greeting]:
        """
        Find greetings whose name matches case-insensitively.

        Args:
            name: Name to look for

        Returns:
            List of greeting entities ordered by created_at ascending
        """
        pass
