"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.

Contains:
- Dependencies: resolve services from the DI container
- Errors: exception handlers for the application error taxonomy
Feature routers live in each feature's api package.
"""
