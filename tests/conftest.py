"""
Pytest fixtures for the Gallery API tests.

Provides small painting documents written to temporary files and a
``make_client`` factory that builds a TestClient around an app pointed
at one of them.
"""

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from gallery_api.app.core.config import Settings  # noqa: E402
from gallery_api.app.main import create_app  # noqa: E402


def _painting(painting_id, year, gallery_id, artist_id, title):
    return {
        "paintingID": painting_id,
        "title": title,
        "yearOfWork": year,
        "gallery": {"galleryID": gallery_id, "galleryName": f"Gallery {gallery_id}"},
        "artist": {"artistID": artist_id, "lastName": f"Artist {artist_id}"},
    }


@pytest.fixture()
def paintings():
    """Three paintings: ids 1, 2, 3 with years 1889, 1503, 1665."""
    return [
        _painting(1, 1889, 21, 31, "The Starry Night"),
        _painting(2, 1503, 1, 2, "Mona Lisa"),
        _painting(3, 1665, 12, 19, "Girl with a Pearl Earring"),
    ]


@pytest.fixture()
def write_document(tmp_path):
    """Write ``content`` to a JSON file and return its path.

    Lists and dicts are serialized; strings and bytes are written as is
    so tests can produce invalid documents.
    """

    def _write(content, name="paintings.json"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        elif isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def data_file(write_document, paintings):
    return write_document(paintings)


@pytest.fixture()
def make_client():
    """Build a TestClient for an app configured with ``data_file``."""

    def _make(data_file, **overrides):
        settings = Settings(data_file=str(data_file), **overrides)
        return TestClient(create_app(settings))

    return _make


@pytest.fixture()
def client(make_client, data_file):
    return make_client(data_file)
