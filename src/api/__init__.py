"""HTTP layer: FastAPI routes, exception handlers and the application factory."""

from .app import create_app

__all__ = ["create_app"]
