"""
Application package initializer.

This package contains the FastAPI application for the Gallery API.
``core`` holds configuration, logging, error kinds and document
loading; ``services`` holds the query logic; ``api`` holds the routes
and ``schemas`` the response models.
"""

from .main import app  # noqa: F401
