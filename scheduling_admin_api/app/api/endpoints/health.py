"""
Health check endpoint.

Public, unauthenticated probe that the database can be reached.
"""

import logging
import sqlite3

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from scheduling_admin_api.app.core.db import ping

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def health() -> JSONResponse:
    try:
        ping()
    except sqlite3.Error:
        logger.exception("Health check could not reach the database")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "database": "unreachable"},
        )
    return JSONResponse(content={"status": "ok", "database": "ok"})
