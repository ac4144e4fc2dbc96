"""
Service layer for paintings.

``PaintingService`` answers the five query shapes of the API by loading
the painting document and running a linear scan over it.  By default
the document is re-read and re-parsed on every call, so edits to the
data file show up on the next request.  With ``cache_document`` the
first successful parse is kept and reused for the lifetime of the
service; failed loads are never cached.

Path parameters arrive as strings while the document usually stores
numbers.  Matching is therefore loose: a parameter and a record value
are compared as numbers when both read as finite numbers and as strings
otherwise, so ``"441"`` and ``"441.0"`` both match ``441``.
"""

from __future__ import annotations

import asyncio
import logging
import math
import re
from pathlib import Path
from typing import Any, List, Optional

from gallery_api.app.core.data import Painting, load_document
from gallery_api.app.core.errors import PaintingsNotFound

PAINTING_NOT_FOUND = "Painting not found :("
GALLERY_NOT_FOUND = "No paintings found in this gallery :("
ARTIST_NOT_FOUND = "No paintings by this artist have been found :("
YEAR_RANGE_NOT_FOUND = "No paintings made in the range {min} - {max}"

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _as_number(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` if it is not numeric.

    Strings are stripped and must be plain ASCII decimal literals, so
    ``"0_2"`` or non-ASCII digits are not numbers.  Booleans are not
    numbers here, nor are integers too large for a float.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL.fullmatch(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def loosely_equal(value: Any, param: str) -> bool:
    """Compare a record value with a path parameter."""
    if value is None or isinstance(value, (bool, dict, list)):
        return False
    left, right = _as_number(value), _as_number(param)
    if left is not None and right is not None:
        return left == right
    return str(value) == param


def _nested_id(record: Painting, key: str, id_key: str) -> Any:
    ref = record.get(key)
    if not isinstance(ref, dict):
        return None
    return ref.get(id_key)


class PaintingService:
    """Query operations over the painting document."""

    def __init__(self, data_path: Path, cache_document: bool = False) -> None:
        self.data_path = data_path
        self.cache_document = cache_document
        self._cached: Optional[List[Painting]] = None

    async def load(self) -> List[Painting]:
        """Load the painting document.

        The blocking read runs in a worker thread.  Raises
        ``DataUnavailable`` or ``DataCorrupt`` on failure.
        """
        if self._cached is not None:
            return self._cached
        paintings = await asyncio.to_thread(load_document, self.data_path)
        if self.cache_document:
            self._cached = paintings
        return paintings

    async def list_paintings(self) -> List[Painting]:
        """Return every painting in document order.

        An empty document is a valid, empty result.
        """
        logger = logging.getLogger(__name__)
        paintings = await self.load()
        logger.debug("Listing %d paintings", len(paintings))
        return paintings

    async def get_painting(self, painting_id: str) -> Painting:
        """Return the first painting whose ``paintingID`` matches."""
        logger = logging.getLogger(__name__)
        for painting in await self.load():
            if loosely_equal(painting.get("paintingID"), painting_id):
                logger.debug("Found painting with id %s", painting_id)
                return painting
        logger.debug("No painting with id %s", painting_id)
        raise PaintingsNotFound(PAINTING_NOT_FOUND)

    async def list_by_gallery(self, gallery_id: str) -> List[Painting]:
        """Return the paintings held by a gallery, in document order."""
        logger = logging.getLogger(__name__)
        paintings = [
            p for p in await self.load()
            if loosely_equal(_nested_id(p, "gallery", "galleryID"), gallery_id)
        ]
        if not paintings:
            logger.debug("No paintings in gallery %s", gallery_id)
            raise PaintingsNotFound(GALLERY_NOT_FOUND)
        logger.debug("Found %d paintings in gallery %s", len(paintings), gallery_id)
        return paintings

    async def list_by_artist(self, artist_id: str) -> List[Painting]:
        """Return the paintings by an artist, in document order."""
        logger = logging.getLogger(__name__)
        paintings = [
            p for p in await self.load()
            if loosely_equal(_nested_id(p, "artist", "artistID"), artist_id)
        ]
        if not paintings:
            logger.debug("No paintings by artist %s", artist_id)
            raise PaintingsNotFound(ARTIST_NOT_FOUND)
        logger.debug("Found %d paintings by artist %s", len(paintings), artist_id)
        return paintings

    async def list_by_year_range(self, min_year: str, max_year: str) -> List[Painting]:
        """Return paintings with ``min_year <= yearOfWork <= max_year``.

        Both bounds are inclusive.  Bounds that are not numbers, or
        ``min_year > max_year``, match nothing.
        """
        logger = logging.getLogger(__name__)
        paintings = await self.load()
        low, high = _as_number(min_year), _as_number(max_year)
        matches: List[Painting] = []
        if low is not None and high is not None:
            for painting in paintings:
                year = _as_number(painting.get("yearOfWork"))
                if year is not None and low <= year <= high:
                    matches.append(painting)
        if not matches:
            logger.debug("No paintings between %s and %s", min_year, max_year)
            raise PaintingsNotFound(YEAR_RANGE_NOT_FOUND.format(min=min_year, max=max_year))
        logger.debug("Found %d paintings between %s and %s", len(matches), min_year, max_year)
        return matches
