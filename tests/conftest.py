"""Pytest configuration and shared fixtures."""
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from onion_app.core.config import AppSettings
from onion_app.di.container import DIContainer
from onion_app.features.greetings.domain.models.greeting import Greeting
from onion_app.features.greetings.domain.repositories.greeting_repository import GreetingRepository
from onion_app.features.greetings.feature import GREETINGS_DATABASE
from onion_app.infrastructure.db.mongo_connection import MongoConnection
from onion_app.main import create_application


class InMemoryGreetingRepository(GreetingRepository):
    """Greeting repository backed by a dict, for tests."""

    def __init__(self) -> None:
        self.records: Dict[UUID, Greeting] = {}
        self.save_calls = 0

    async def save(self, greeting: Greeting) -> Greeting:
        self.save_calls += 1
        self.records[greeting.id] = greeting
        return greeting

    async def get_by_id(self, greeting_id: UUID) -> Optional[Greeting]:
        return self.records.get(greeting_id)

    async def get_all(self) -> List[Greeting]:
        return sorted(self.records.values(), key=lambda g: g.created_at)

    async def get_by_name(self, name: str) -> List[Greeting]:
        wanted = name.casefold()
        return sorted(
            (g for g in self.records.values() if g.name.value.casefold() == wanted),
            key=lambda g: g.created_at,
        )


@pytest.fixture
def settings() -> AppSettings:
    """Settings snapshot that never touches the process environment."""
    return AppSettings(
        application_name="Greetings Test API",
        environment="test",
        connection_strings={"greetings": "mongodb://localhost:27017/greetings_test"},
    )


@pytest.fixture
def repository() -> InMemoryGreetingRepository:
    return InMemoryGreetingRepository()


@pytest.fixture
def greetings_collection() -> MagicMock:
    """Mocked greetings collection; startup index creation lands here."""
    collection = MagicMock()
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def mongo_connection(greetings_collection) -> MagicMock:
    """Stand-in for the greetings MongoConnection (no server needed)."""
    connection = MagicMock(spec=MongoConnection)
    connection.get_collection.return_value = greetings_collection
    return connection


def use_storage(container: DIContainer, connection) -> DIContainer:
    """Replace the greetings storage binding of an already wired container."""
    container.register_singleton(GREETINGS_DATABASE, connection)
    return container


@pytest.fixture
def container(settings, repository, mongo_connection) -> DIContainer:
    """Fully wired container: in-memory repository, mocked greetings storage."""
    container = use_storage(DIContainer(settings), mongo_connection)
    container.register_factory(GreetingRepository, lambda: repository)
    return container


@pytest.fixture
def test_client(settings, container):
    """Test client with the lifespan (feature initialization) running."""
    app = create_application(settings, container)
    with TestClient(app) as client:
        yield client
