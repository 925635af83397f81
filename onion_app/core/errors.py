"""
Application Errors
==================

Error taxonomy shared by every feature.

- ValidationError: bad input rejected by a value object (never retried)
- NotFoundError: lookup miss surfaced by the transport layer
- PersistenceError: storage I/O failure (not retried automatically)
- InitializationError: a feature failed during startup (always fatal)
"""
from typing import Optional


class AppError(Exception):
    """Base class for all application errors."""


class ValidationError(AppError):
    """
    Raised when raw input violates a value object invariant.

    Attributes:
        reason: Short machine-friendly reason ("empty or whitespace",
            "exceeds maximum length")
        field: Name of the offending field, if known
    """

    EMPTY = "empty or whitespace"
    TOO_LONG = "exceeds maximum length"

    def __init__(self, message: str, reason: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.field = field


class NotFoundError(AppError):
    """Raised by the transport layer when a requested resource does not exist."""

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} '{identifier}' not found")
        self.resource = resource
        self.identifier = identifier


class PersistenceError(AppError):
    """Raised when a storage adapter fails to read or write."""


class InitializationError(AppError):
    """Raised when a feature fails its startup initialization."""

    def __init__(self, feature_name: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Failed to initialize feature: {feature_name}")
        self.feature_name = feature_name
