"""
Top-level router for the API.

Painting routes live under ``/api/paintings``; the health check sits
at the root.  When new areas are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, paintings

router = APIRouter()

router.include_router(paintings.router, prefix="/api/paintings", tags=["paintings"])
router.include_router(health.router, tags=["health"])
