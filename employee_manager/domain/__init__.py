"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Models: the Employee record
- Repository Interfaces: Abstract contracts for data access
"""
