"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (create, update, delete employee)
- Services: Application services that coordinate multiple use cases
- DTOs: Pydantic request/response models
"""
