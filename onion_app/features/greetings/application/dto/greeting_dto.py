"""
Greeting DTO
============

Pydantic models for greeting API requests and responses.
"""
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from onion_app.features.greetings.domain.models.greeting import Greeting


class CreateGreetingRequest(BaseModel):
    """DTO for creating a greeting. Validation happens in the domain layer."""
    name: str = Field(..., description="Name of the person to greet")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Ada"}
        }
    )


class GreetingResponse(BaseModel):
    """DTO for greeting data."""
    id: UUID
    name: str
    message: str
    created_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "name": "Ada",
                "message": "Hello, Ada!",
                "created_at": "2025-12-20T09:11:50.840Z"
            }
        }
    )

    @classmethod
    def from_entity(cls, greeting: Greeting) -> "GreetingResponse":
        return cls(
            id=greeting.id,
            name=greeting.name.value,
            message=greeting.message.value,
            created_at=greeting.created_at,
        )
