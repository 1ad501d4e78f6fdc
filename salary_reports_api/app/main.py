"""
Main entrypoint for the Salary Reports API.

This module assembles the FastAPI application, sets up logging, CORS
and the error handlers, and includes the versioned router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn salary_reports_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import NotFound, SourceUnavailable
from .core.logging_config import setup_logging
from .schemas.report import Message
from .services.record_source import get_record_source

logger = logging.getLogger(__name__)


async def source_unavailable_handler(request: Request, exc: SourceUnavailable) -> JSONResponse:
    logger.error("Error processing %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Failed to process reports"},
    )


async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(exc)})


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    ValueError
        If ``RECORD_SOURCE`` is unknown or a file based source has no
        ``DATA_PATH``.
    """
    # Initialise logging before anything else so that the routes can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    # Fail at startup rather than on every request when the record
    # source configuration is unusable.
    try:
        get_record_source(settings)
    except ValueError as exc:
        logger.error("Invalid record source configuration: %s", exc)
        raise

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["Content-Length"],
        max_age=600,
    )

    app.add_exception_handler(SourceUnavailable, source_unavailable_handler)
    app.add_exception_handler(NotFound, not_found_handler)

    @app.get("/", response_model=Message, tags=["info"])
    async def welcome() -> Message:
        return Message(message=f"Welcome to the {settings.project_name}")

    # The v1 routes keep the unversioned paths of the original service.
    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
