"""Entry point for the Gallery API server.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``gallery_api/app/core/config.py`` for
the remaining settings.

Usage:
    python run.py
    PORT=8080 DATA_FILE=/srv/paintings.json python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from gallery_api.app.core.config import settings
from gallery_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
