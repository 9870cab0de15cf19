"""
Main entrypoint for the Pig Farm Records API.

This module assembles the FastAPI application: it sets up logging,
opens the record store, registers the error handlers and includes the
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn pig_farm_api.app.main:app --reload

Errors are always answered with a JSON body of the form
``{"error": "<message>"}``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import RecordStore
from .core.logging_config import setup_logging
from .services.resources import RESOURCES


logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Raised by FastAPI before a handler runs, e.g. for a body that is not valid JSON.
    logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
    message = "Invalid input: request body must be a valid JSON object."
    if request.method == "POST":
        for resource in RESOURCES:
            if request.url.path.rstrip("/") == resource.path:
                message = resource.invalid_input_message
                break
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error."},
    )


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        module settings.
    store : Optional[RecordStore]
        Record store to serve.  When omitted a store is opened at
        ``settings.database_url`` and closed on shutdown; a store
        passed in is left open for the caller.

    Returns
    -------
    FastAPI
        A configured FastAPI instance ready to be served.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    owns_store = store is None
    if store is None:
        store = RecordStore(settings.database_url)
    store.init_db()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if owns_store:
            store.close()

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(router)

    logger.info("%s %s serving records from %s", settings.project_name, settings.api_version, store.path)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
