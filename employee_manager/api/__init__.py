"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer handles HTTP requests and responses.

Contains:
- v1: FastAPI controllers and dependency wiring
- errors: exception handlers rendering the `{"message": ...}` envelope
"""
