"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box against the bundled sample document.
Call ``Settings.from_env()`` to pick up the current environment; the
module-level ``settings`` instance is built once at import time.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

_TRUE_VALUES = {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = "Gallery API"
    api_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Location of the painting document.  A relative path is resolved
    # against the ``gallery_api`` package directory by ``data_path``.
    data_file: str = "data/paintings-nested.json"

    # Keep the first successfully parsed document in memory and reuse
    # it.  There is no invalidation, so edits to the data file are only
    # picked up after a restart.
    cache_document: bool = False

    # Optional directory of static files served at ``/``.
    static_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Create a Settings instance populated from environment variables."""
        return cls(
            project_name=os.getenv("PROJECT_NAME", "Gallery API"),
            api_version=os.getenv("API_VERSION", "1.0.0"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            data_file=os.getenv("DATA_FILE", "data/paintings-nested.json"),
            cache_document=os.getenv("CACHE_DOCUMENT", "false").lower() in _TRUE_VALUES,
            static_dir=os.getenv("STATIC_DIR") or None,
        )

    @property
    def data_path(self) -> Path:
        """Absolute path of the painting document.

        If ``data_file`` is absolute it is used directly, otherwise it is
        resolved relative to the installed ``gallery_api`` package.
        """
        path = Path(self.data_file)
        if path.is_absolute():
            return path
        base_dir = Path(__file__).resolve().parent.parent.parent  # gallery_api/
        return (base_dir / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings.from_env()
