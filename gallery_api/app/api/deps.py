"""
API dependency injection.

The ``PaintingService`` is created once by ``create_app`` and stored on
``app.state``; handlers receive it through ``Depends``.
"""

from fastapi import Request

from gallery_api.app.services.painting_service import PaintingService


def get_painting_service(request: Request) -> PaintingService:
    """Return the painting service attached to the running application."""
    return request.app.state.painting_service
