"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create greeting)
- Services: Application services used by the transport layer
- DTOs: Pydantic request/response models
"""
