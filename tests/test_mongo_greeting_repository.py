"""Tests for the MongoDB greeting repository (collection is mocked)."""
import uuid
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from onion_app.core.errors import PersistenceError
from onion_app.features.greetings.domain.models.greeting import Greeting
from onion_app.features.greetings.domain.value_objects import PersonName
from onion_app.features.greetings.infrastructure.db.mongo_greeting_repository import (
    NAME_COLLATION,
    MongoGreetingRepository,
)


def _document(name="Ada", message=None, created_at=None, greeting_id=None):
    return {
        "id": str(greeting_id or uuid.uuid4()),
        "name": name,
        "message": message or f"Hello, {name}!",
        "created_at": created_at or datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
    }


@pytest.fixture
def cursor():
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    return cursor


@pytest.fixture
def collection(cursor):
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.create_index = AsyncMock()
    collection.find.return_value = cursor
    return collection


@pytest.fixture
def repo(collection):
    return MongoGreetingRepository(collection)


@pytest.mark.asyncio
async def test_save_inserts_document(repo, collection):
    greeting = Greeting.create_new(PersonName("Ada"))

    result = await repo.save(greeting)

    assert result is greeting
    collection.insert_one.assert_awaited_once_with({
        "id": str(greeting.id),
        "name": "Ada",
        "message": "Hello, Ada!",
        "created_at": greeting.created_at,
    })


@pytest.mark.asyncio
async def test_save_wraps_driver_errors(repo, collection):
    collection.insert_one.side_effect = DuplicateKeyError("duplicate id")

    with pytest.raises(PersistenceError) as excinfo:
        await repo.save(Greeting.create_new(PersonName("Ada")))

    assert isinstance(excinfo.value.__cause__, DuplicateKeyError)


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(repo, collection):
    greeting_id = uuid.uuid4()

    assert await repo.get_by_id(greeting_id) is None
    collection.find_one.assert_awaited_once_with({"id": str(greeting_id)}, projection={"_id": False})


@pytest.mark.asyncio
async def test_get_by_id_maps_document(repo, collection):
    greeting_id = uuid.uuid4()
    collection.find_one.return_value = _document("Grace", greeting_id=greeting_id)

    greeting = await repo.get_by_id(greeting_id)

    assert greeting.id == greeting_id
    assert greeting.name.value == "Grace"
    assert greeting.message.value == "Hello, Grace!"
    assert greeting.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_naive_timestamps_are_read_as_utc(repo, collection):
    collection.find_one.return_value = _document(created_at=datetime(2025, 1, 1, 9, 0))

    greeting = await repo.get_by_id(uuid.uuid4())

    assert greeting.created_at == datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_get_all_sorts_by_created_at(repo, collection, cursor):
    cursor.to_list.return_value = [_document("A"), _document("B")]

    greetings = await repo.get_all()

    assert [g.name.value for g in greetings] == ["A", "B"]
    collection.find.assert_called_once_with({}, projection={"_id": False})
    cursor.sort.assert_called_once_with("created_at", ASCENDING)


@pytest.mark.asyncio
async def test_get_by_name_uses_case_insensitive_collation(repo, collection, cursor):
    cursor.to_list.return_value = [_document("Ada")]

    greetings = await repo.get_by_name("ada")

    assert [g.name.value for g in greetings] == ["Ada"]
    collection.find.assert_called_once_with(
        {"name": "ada"}, projection={"_id": False}, collation=NAME_COLLATION
    )
    assert NAME_COLLATION.document["strength"] == 2
    cursor.sort.assert_called_once_with("created_at", ASCENDING)


@pytest.mark.asyncio
async def test_query_failure_raises_persistence_error(repo, cursor):
    cursor.to_list.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(PersistenceError):
        await repo.get_all()


@pytest.mark.asyncio
async def test_invalid_stored_record_raises_persistence_error(repo, collection):
    collection.find_one.return_value = _document(name="x" * 150)

    with pytest.raises(PersistenceError) as excinfo:
        await repo.get_by_id(uuid.uuid4())

    assert "invalid" in str(excinfo.value)


@pytest.mark.asyncio
async def test_record_with_bad_id_raises_persistence_error(repo, collection):
    doc = _document()
    doc["id"] = "not-a-uuid"
    collection.find_one.return_value = doc

    with pytest.raises(PersistenceError):
        await repo.get_by_id(uuid.uuid4())


@pytest.mark.asyncio
async def test_ensure_indexes(repo, collection):
    await repo.ensure_indexes()

    calls = collection.create_index.await_args_list
    assert len(calls) == 3
    assert calls[0].args == ([("id", ASCENDING)],)
    assert calls[0].kwargs["unique"] is True
    assert calls[1].kwargs["collation"] is NAME_COLLATION
    assert calls[2].args == ([("created_at", ASCENDING)],)
