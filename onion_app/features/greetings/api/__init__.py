"""
Greetings API
=============

FastAPI routers for the greetings feature.
"""
from .greeting_controller import legacy_router as hello_router
from .greeting_controller import router as greeting_router

__all__ = ["greeting_router", "hello_router"]
