"""REST API presentation layer for Passgate.

This package provides a FastAPI-based REST API.

Structure:
    api/
    ├── app.py                 # FastAPI application factory
    ├── asgi.py                # ASGI entry point for uvicorn
    ├── dependencies.py        # Dependency injection
    ├── exception_handlers.py  # Failure -> HTTP response mapping
    ├── routers/               # API route handlers
    └── schemas/               # Pydantic response schemas
"""

from passgate.presentation.api.app import create_app

__all__ = ["create_app"]
