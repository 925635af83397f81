"""
Greetings Feature Package
=========================

Layers:
- domain: value objects, Greeting aggregate, repository interface
- application: DTOs, use cases, service
- infrastructure: MongoDB repository
- api: FastAPI routes
"""
from .feature import GreetingsFeature

__all__ = ["GreetingsFeature"]
