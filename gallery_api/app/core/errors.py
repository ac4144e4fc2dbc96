"""
Error kinds raised by the query layer.

Two of them describe a document that could not be loaded
(``DataUnavailable`` when the file cannot be read, ``DataCorrupt`` when
its contents cannot be parsed into a list of records).  The API maps
both to the same generic 500 response.  ``PaintingsNotFound`` is the
expected outcome of a filter that matched nothing and maps to 404.
"""

from pathlib import Path


class GalleryAPIError(Exception):
    """Base class for all errors raised by the gallery API."""


class DocumentError(GalleryAPIError):
    """The painting document could not be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DataUnavailable(DocumentError):
    """The painting document could not be read."""


class DataCorrupt(DocumentError):
    """The painting document is not a JSON array of objects."""


class PaintingsNotFound(GalleryAPIError):
    """A filtered query matched no paintings."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
