"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Value Objects: PersonName, MessageText
- Entities: Greeting aggregate root
- Repository Interfaces: Abstract contracts for data access
"""
