"""
Exception Handlers
==================

Maps application errors to HTTP responses.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from onion_app.core.config import AppSettings
from onion_app.core.errors import NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(application: FastAPI, settings: AppSettings) -> None:
    """Install handlers for the application error taxonomy."""

    @application.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message, "reason": exc.reason, "field": exc.field},
        )

    @application.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @application.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
        detail = str(exc) if settings.detailed_errors else "Storage is unavailable"
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": detail},
        )
