"""
Protus API package.

Provides the FastAPI application for the Protus project management API.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
