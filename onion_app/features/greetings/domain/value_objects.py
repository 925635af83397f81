"""
Greeting Value Objects
======================

Immutable, self-validating primitives. Construction either yields a valid
value or raises ValidationError; these are the single enforcement point for
name and message integrity.
"""
from dataclasses import dataclass
from typing import ClassVar

from onion_app.core.errors import ValidationError


def _validated(value: object, label: str, max_length: int) -> str:
    """Trim and check a raw string, returning the stored value."""
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{label} must be a string, got {type(value).__name__}")

    trimmed = (value or "").strip()
    if not trimmed:
        raise ValidationError(
            f"{label} cannot be empty or whitespace.",
            reason=ValidationError.EMPTY,
            field=label.lower(),
        )
    # Bound applies to the raw input, padding included
    if len(value) > max_length:
        raise ValidationError(
            f"{label} cannot exceed {max_length} characters.",
            reason=ValidationError.TOO_LONG,
            field=label.lower(),
        )
    return trimmed


@dataclass(frozen=True)
class PersonName:
    """Name of the person being greeted (1-100 characters after trimming)."""
    value: str

    MAX_LENGTH: ClassVar[int] = 100

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validated(self.value, "Name", self.MAX_LENGTH))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MessageText:
    """Greeting message (1-200 characters after trimming)."""
    value: str

    MAX_LENGTH: ClassVar[int] = 200

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _validated(self.value, "Message", self.MAX_LENGTH))

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default_for(cls, name: PersonName) -> "MessageText":
        """Default message for a name: "Hello, {name}!"."""
        return cls(f"Hello, {name.value}!")
