"""
Logging setup for the Gallery API.

``create_app`` calls ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Document load failures are logged at
ERROR by ``core.data`` and ``main``; per-query outcomes are logged at
DEBUG by the painting service, so ``LOG_LEVEL=DEBUG`` shows every
lookup and how many paintings it matched.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Send Gallery API logs to the console and optionally to ``logfile``.

    Does nothing when the root logger already has handlers, which is the
    case under uvicorn's own logging setup and when ``create_app`` runs
    more than once in the same process.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; case insensitive, unknown names
        mean ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record, e.g. from
        ``LOG_FILE=/var/log/gallery-api.log``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
