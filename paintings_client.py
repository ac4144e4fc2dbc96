"""Gallery API client.

This module defines a small client wrapper around the read-only
painting routes of the Gallery API.  The client uses the ``requests``
library internally and exposes one method per query:

* :meth:`PaintingsAPI.list_paintings` – return every painting.
* :meth:`PaintingsAPI.get_painting` – fetch a single painting by id.
* :meth:`PaintingsAPI.list_by_gallery` – paintings held by a gallery.
* :meth:`PaintingsAPI.list_by_artist` – paintings by an artist.
* :meth:`PaintingsAPI.list_by_year_range` – paintings made within a
  range of years.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.

It can also be run as a script::

    python paintings_client.py --base-url http://localhost:3000 year 1600 1700
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.getenv("GALLERY_API_URL", "http://localhost:3000")

Error = Dict[str, Any]


class PaintingsAPI:
    """Client for the Gallery API painting routes."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _get(self, path: str) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform a GET request and decode the JSON body.

        Args:
            path: Path relative to :attr:`base_url` (e.g. ``/api/paintings``).
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("message") or err_json.get("detail") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    # The server answers 500 with a plain-text body.
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        except ValueError as exc:
            logger.error("API returned invalid JSON from %s: %s", url, exc)
            return None, {"status_code": None, "message": f"Invalid JSON response: {exc}"}

    # ------------------------------------------------------------------
    # Painting operations
    # ------------------------------------------------------------------
    def list_paintings(self) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        """Retrieve all paintings."""
        return self._get("/api/paintings")

    def get_painting(self, painting_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single painting by ID."""
        return self._get(f"/api/paintings/{painting_id}")

    def list_by_gallery(self, gallery_id: Any) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        """Retrieve the paintings held by a gallery."""
        return self._get(f"/api/paintings/gallery/{gallery_id}")

    def list_by_artist(self, artist_id: Any) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        """Retrieve the paintings by an artist."""
        return self._get(f"/api/paintings/artist/{artist_id}")

    def list_by_year_range(
        self, min_year: Any, max_year: Any
    ) -> Tuple[Optional[List[Dict[str, Any]]], Optional[Error]]:
        """Retrieve the paintings made between two years, inclusive."""
        return self._get(f"/api/paintings/year/{min_year}/{max_year}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the Gallery API.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("all", help="list every painting")
    for name, help_text in (
        ("id", "fetch a painting by id"),
        ("gallery", "list paintings in a gallery"),
        ("artist", "list paintings by an artist"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("value")
    year = sub.add_parser("year", help="list paintings made within a range of years")
    year.add_argument("min_year")
    year.add_argument("max_year")
    return parser


def main(argv: Optional[Sequence[str]] = None, api: Optional[PaintingsAPI] = None) -> int:
    """Run the command line client and return the exit status."""
    args = _build_parser().parse_args(argv)
    api = api or PaintingsAPI(base_url=args.base_url)

    if args.command == "all":
        data, error = api.list_paintings()
    elif args.command == "id":
        data, error = api.get_painting(args.value)
    elif args.command == "gallery":
        data, error = api.list_by_gallery(args.value)
    elif args.command == "artist":
        data, error = api.list_by_artist(args.value)
    else:
        data, error = api.list_by_year_range(args.min_year, args.max_year)

    if error:
        print(f"Error ({error['status_code']}): {error['message']}", file=sys.stderr)
        return 1
    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    sys.exit(main())
