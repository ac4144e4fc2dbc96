"""
Painting endpoints.

Read-only routes over the painting document: list everything, fetch
one painting by id, and filter by gallery, artist or year range.  The
filtered routes answer 404 with a ``{"message": ...}`` body when
nothing matches; a document that cannot be loaded answers 500.  Both
mappings are done by the exception handlers registered in
``main.create_app``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from gallery_api.app.api.deps import get_painting_service
from gallery_api.app.schemas.painting import Message, Painting
from gallery_api.app.services.painting_service import PaintingService

router = APIRouter()

_ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    500: {
        "description": "The data file could not be read or parsed",
        "content": {"text/plain": {"example": "Error reading data file."}},
    },
}
_NOT_FOUND_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    404: {"model": Message},
    **_ERROR_RESPONSES,
}


@router.get(
    "",
    response_model=None,
    responses={200: {"model": List[Painting]}, **_ERROR_RESPONSES},
)
async def list_paintings(
    service: PaintingService = Depends(get_painting_service),
) -> List[Dict[str, Any]]:
    """Return every painting in document order.

    An empty document yields an empty list, not a 404.
    """
    return await service.list_paintings()


@router.get(
    "/gallery/{gallery_id}",
    response_model=None,
    responses={200: {"model": List[Painting]}, **_NOT_FOUND_RESPONSES},
)
async def list_paintings_by_gallery(
    gallery_id: str,
    service: PaintingService = Depends(get_painting_service),
) -> List[Dict[str, Any]]:
    """Return the paintings held by a gallery."""
    return await service.list_by_gallery(gallery_id)


@router.get(
    "/artist/{artist_id}",
    response_model=None,
    responses={200: {"model": List[Painting]}, **_NOT_FOUND_RESPONSES},
)
async def list_paintings_by_artist(
    artist_id: str,
    service: PaintingService = Depends(get_painting_service),
) -> List[Dict[str, Any]]:
    """Return the paintings by an artist."""
    return await service.list_by_artist(artist_id)


@router.get(
    "/year/{min_year}/{max_year}",
    response_model=None,
    responses={200: {"model": List[Painting]}, **_NOT_FOUND_RESPONSES},
)
async def list_paintings_by_year_range(
    min_year: str,
    max_year: str,
    service: PaintingService = Depends(get_painting_service),
) -> List[Dict[str, Any]]:
    """Return paintings made between ``min_year`` and ``max_year`` inclusive."""
    return await service.list_by_year_range(min_year, max_year)


@router.get(
    "/{painting_id}",
    response_model=None,
    responses={200: {"model": Painting}, **_NOT_FOUND_RESPONSES},
)
async def get_painting(
    painting_id: str,
    service: PaintingService = Depends(get_painting_service),
) -> Dict[str, Any]:
    """Retrieve a single painting by its ID.

    If the document holds duplicate ids the first one wins.
    """
    return await service.get_painting(painting_id)
