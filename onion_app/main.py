"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
Startup: settings → logging → feature registration → app → feature initialization
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from onion_app.api.errors import register_exception_handlers
from onion_app.core.config import AppSettings, load_settings
from onion_app.core.logging import setup_logging
from onion_app.di.container import DIContainer
from onion_app.features.greetings.api import greeting_router, hello_router
from onion_app.infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[AppSettings] = None,
    container: Optional[DIContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Settings snapshot and logging
    - Feature registration (storage, then services) in the DI container
    - CORS middleware configuration
    - API route registration and error handlers
    - Lifespan handler that initializes every feature before serving

    Args:
        settings: Settings snapshot (loaded from the environment when omitted)
        container: Pre-built container (built from settings when omitted)

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = container.settings if container is not None else load_settings()
    if container is None:
        container = DIContainer(settings)

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        # Fail-fast: an InitializationError here aborts startup
        try:
            await container.initialize_features()
            logger.info(f"{settings.application_name} started successfully ({settings.environment})")
            yield
        finally:
            for instance in list(container.instances.values()):
                if isinstance(instance, MongoConnection):
                    await instance.close()
            logger.info(f"{settings.application_name} stopped")

    application = FastAPI(
        title=settings.application_name,
        description="REST API built from independently registered features",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application, settings)

    application.include_router(greeting_router)
    application.include_router(hello_router)

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


def build_app() -> FastAPI:
    """Entry point for ASGI servers: uvicorn --factory onion_app.main:build_app"""
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_include_scopes)
    return create_application(settings)
