"""
Dependency Container
====================

FastAPI dependencies resolving services from the application's DI container.
The container lives on app.state and is built once in create_application().
"""
from fastapi import Request

from onion_app.core.config import AppSettings
from onion_app.di.container import DIContainer
from onion_app.features.greetings.application.services.greeting_service import GreetingService


def get_container(request: Request) -> DIContainer:
    """Get the DI container of the running application."""
    return request.app.state.container


def get_settings(request: Request) -> AppSettings:
    """Get the application settings snapshot."""
    return get_container(request).get(AppSettings)


def get_greeting_service(request: Request) -> GreetingService:
    """
    Get a greeting service instance (new per request).

    Returns:
        GreetingService instance
    """
    return get_container(request).get(GreetingService)
