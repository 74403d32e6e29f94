"""
Main entrypoint for the Scheduling Admin API.

This module assembles the FastAPI application: it sets up logging,
registers the error handlers, applies database migrations on startup
and mounts the API router under ``/api``.  ``create_app`` builds the
application, which is then instantiated at module import time as
``app`` so it can be served directly::

    uvicorn scheduling_admin_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file on first start and brings the schema
    # up to the latest migration.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application instance ready to be served.
    """
    # Logging first so that everything below can log safely.
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
