"""
Main entrypoint for the Task List API.

This module assembles the FastAPI application: it sets up logging,
creates the database handle for the process lifetime, installs CORS
and the JSON error handlers and mounts the route table.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with uvicorn, e.g.::

    uvicorn tasklist_api.app.main:app --port 4000
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import build_router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.logging_config import setup_logging
from .schemas.task import EMPTY_TEXT_MESSAGE

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request"
INTERNAL_ERROR_MESSAGE = "Internal server error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": <message>}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed input as HTTP 400 with a static message.

    Problems with the body (missing, empty or non-string ``text``, bad
    JSON) share the empty-text message; anything else, such as a
    non-integer path id, gets a generic one.
    """
    body_error = any(error.get("loc", ())[:1] == ("body",) for error in exc.errors())
    message = EMPTY_TEXT_MESSAGE if body_error else INVALID_REQUEST_MESSAGE
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and hide their details from the client."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def create_app(
    app_settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use.  Defaults to the values read from the
        environment.
    database : Optional[Database]
        Pre-built database handle.  When given, the caller owns it and
        it is not disposed on shutdown.  Otherwise one is created from
        ``app_settings`` on startup and disposed on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    setup_logging(cfg.log_level, cfg.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = database if database is not None else Database.from_settings(cfg)
        # A store that is down at startup is logged, not fatal; requests
        # will fail with 500 until it comes back.
        if await db.check_connection():
            await db.init()
        app.state.database = db
        try:
            yield
        finally:
            app.state.database = None
            if database is None:
                await db.dispose()

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, lifespan=lifespan)

    origins = cfg.cors_origin_list
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type"],
        )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(build_router())
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
