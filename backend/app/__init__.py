"""FastAPI application package for the back office."""

from __future__ import annotations


def get_app():
    """Return the FastAPI application without importing it eagerly.

    Alembic imports :mod:`app.models` through this package, so the web stack
    is only loaded on demand.
    """

    from .main import app as fastapi_app

    return fastapi_app


__all__ = ["get_app"]
