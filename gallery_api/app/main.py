"""
Main entrypoint for the Gallery API.

This module assembles the FastAPI application, sets up logging,
registers the error-to-response mapping and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with uvicorn or another ASGI server, e.g.::

    uvicorn gallery_api.app.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import DocumentError, PaintingsNotFound
from .core.logging_config import setup_logging
from .services.painting_service import PaintingService

DATA_ERROR_TEXT = "Error reading data file."


async def _document_error_handler(request: Request, exc: DocumentError) -> PlainTextResponse:
    # Missing and unparsable documents look the same to the caller.
    logging.getLogger(__name__).error("%s %s failed: %s", request.method, request.url.path, exc)
    return PlainTextResponse(DATA_ERROR_TEXT, status_code=500)


async def _not_found_handler(request: Request, exc: PaintingsNotFound) -> JSONResponse:
    return JSONResponse({"message": exc.message}, status_code=404)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.painting_service = PaintingService(
        settings.data_path, cache_document=settings.cache_document
    )

    app.add_exception_handler(DocumentError, _document_error_handler)
    app.add_exception_handler(PaintingsNotFound, _not_found_handler)

    app.include_router(router)

    # Mounted last so the API routes take precedence over files.
    if settings.static_dir:
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
        logger.info("Serving static files from %s", settings.static_dir)

    logger.info("Serving paintings from %s", settings.data_path)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
