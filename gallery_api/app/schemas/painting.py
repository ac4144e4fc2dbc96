"""
Pydantic schemas for painting responses.

The shape of a painting is owned by the data file, not by this
service, so these models only describe the fields the filters rely on
and let everything else through (``extra="allow"``).  They document
the API in the OpenAPI schema; handlers return the records exactly as
they appear in the document.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class GalleryRef(BaseModel):
    """Gallery embedded in a painting record."""

    galleryID: Any = Field(..., examples=[5])
    galleryName: Optional[str] = Field(None, examples=["National Gallery"])

    model_config = {"extra": "allow"}


class ArtistRef(BaseModel):
    """Artist embedded in a painting record."""

    artistID: Any = Field(..., examples=[19])
    lastName: Optional[str] = Field(None, examples=["Vermeer"])

    model_config = {"extra": "allow"}


class Painting(BaseModel):
    """A single painting record."""

    paintingID: Any = Field(..., examples=[441])
    title: Optional[str] = Field(None, examples=["Girl with a Pearl Earring"])
    yearOfWork: Any = Field(..., examples=[1665])
    gallery: GalleryRef
    artist: ArtistRef

    model_config = {"extra": "allow"}


class Message(BaseModel):
    """Body of a 404 response."""

    message: str = Field(..., examples=["Painting not found :("])


class HealthStatus(BaseModel):
    """Body of the health check response."""

    status: str
    data_file: str
    data_file_exists: bool
