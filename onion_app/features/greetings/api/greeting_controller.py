"""
Greeting Controller
===================

FastAPI controller for greeting endpoints.
Domain errors are turned into HTTP responses by the handlers in onion_app.api.errors.
"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from onion_app.api.dependencies import get_greeting_service
from onion_app.core.errors import NotFoundError
from onion_app.features.greetings.application.dto.greeting_dto import (
    CreateGreetingRequest,
    GreetingResponse,
)
from onion_app.features.greetings.application.services.greeting_service import GreetingService

router = APIRouter(prefix="/api/greetings", tags=["greetings"])
legacy_router = APIRouter(tags=["greetings"])


@router.post(
    "",
    response_model=GreetingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a greeting",
    description="Creates a greeting for the given name. The message is \"Hello, {name}!\".",
)
async def create_greeting(
    request: CreateGreetingRequest,
    service: GreetingService = Depends(get_greeting_service),
) -> GreetingResponse:
    """Create a greeting."""
    return await service.create_greeting(request.name)


@router.get(
    "",
    response_model=List[GreetingResponse],
    summary="List greetings",
    description="Get all greetings, oldest first.",
)
async def list_greetings(
    service: GreetingService = Depends(get_greeting_service),
) -> List[GreetingResponse]:
    """List all greetings."""
    return await service.list_greetings()


@router.get(
    "/by-name/{name}",
    response_model=List[GreetingResponse],
    summary="Find greetings by name",
    description="Get greetings whose name matches (case-insensitive), oldest first.",
)
async def find_greetings_by_name(
    name: str,
    service: GreetingService = Depends(get_greeting_service),
) -> List[GreetingResponse]:
    """Find greetings by name."""
    return await service.find_greetings_by_name(name)


@router.get(
    "/{greeting_id}",
    response_model=GreetingResponse,
    summary="Get greeting by ID",
)
async def get_greeting(
    greeting_id: str,
    service: GreetingService = Depends(get_greeting_service),
) -> GreetingResponse:
    """Get a specific greeting by ID. An id that is not a UUID matches nothing."""
    try:
        parsed_id = UUID(greeting_id)
    except ValueError:
        raise NotFoundError("Greeting", greeting_id)
    greeting = await service.get_greeting(parsed_id)
    if greeting is None:
        raise NotFoundError("Greeting", greeting_id)
    return greeting


@legacy_router.get(
    "/hello",
    response_class=PlainTextResponse,
    summary="Say hello",
    description="Legacy endpoint: creates a greeting and returns only its message.",
)
async def hello(
    name: str = "",
    service: GreetingService = Depends(get_greeting_service),
) -> str:
    """Create a greeting and return its message text."""
    greeting = await service.create_greeting(name)
    return greeting.message
