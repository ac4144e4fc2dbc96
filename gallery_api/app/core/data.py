"""
Loading of the painting document.

The document is a JSON array of painting objects kept in a static file.
``load_document`` reads and parses it in one go and turns every failure
into one of the two ``DocumentError`` subclasses, so callers only need
to handle those.  Reading is blocking; async callers should run it in a
worker thread.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List

from .errors import DataCorrupt, DataUnavailable

Painting = Dict[str, Any]

logger = logging.getLogger(__name__)


def read_document(path: Path) -> bytes:
    """Return the raw bytes of the document at ``path``.

    Raises ``DataUnavailable`` if the file is missing or unreadable.
    """
    try:
        return path.read_bytes()
    except OSError as exc:
        logger.error("Error reading data file %s: %s", path, exc)
        raise DataUnavailable(path, str(exc)) from exc


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-standard JSON constant {token}")


def _finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"number out of range: {text}")
    return number


def parse_document(path: Path, raw: bytes) -> List[Painting]:
    """Parse ``raw`` into a list of painting records.

    Raises ``DataCorrupt`` if the bytes are not valid JSON or the top
    level is not an array of objects.  ``NaN``, ``Infinity``, floats that
    overflow and integers past the interpreter's digit limit are rejected
    too, since none of them can be written back out as JSON.
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        logger.error("Error parsing data file %s: %s", path, exc)
        raise DataCorrupt(path, str(exc)) from exc

    if not isinstance(document, list):
        logger.error("Data file %s does not contain a JSON array", path)
        raise DataCorrupt(path, f"expected a JSON array, got {type(document).__name__}")
    for index, record in enumerate(document):
        if not isinstance(record, dict):
            logger.error("Data file %s: record %d is not an object", path, index)
            raise DataCorrupt(path, f"record {index} is not an object")
    return document


def load_document(path: Path) -> List[Painting]:
    """Read and parse the painting document at ``path``."""
    return parse_document(path, read_document(path))
