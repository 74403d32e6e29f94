"""
Error types and their mapping to HTTP responses.

* Authentication, not‑found and precondition failures are raised by
  endpoints and dependencies as ``HTTPException`` and rendered by
  FastAPI as ``{"detail": ...}``.
* ``ValidationFailed`` carries field‑level issues and becomes
  HTTP 400 with ``{"detail": "Invalid data", "issues": [...]}``.
  Malformed JSON bodies and path parameters (FastAPI's
  ``RequestValidationError``) are rendered the same way.
* Database errors (``sqlite3.Error``) are logged with their traceback
  and returned as an opaque HTTP 500.  No error detail leaves the
  process and nothing is retried.
"""

import logging
import sqlite3
from typing import Dict, Iterable, List, Sequence, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

Issue = Dict[str, str]


def issues_from_errors(errors: Iterable[dict], prefix: Sequence[Union[str, int]] = ()) -> List[Issue]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` issues.

    ``prefix`` is prepended to every error location, so errors of the
    third availability window become ``availabilities.2.<field>``.  An
    error with no location at all is reported against ``body``.
    """
    issues: List[Issue] = []
    for error in errors:
        loc = [*prefix, *error.get("loc", ())]
        field = ".".join(str(part) for part in loc) or "body"
        issues.append({"field": field, "message": error["msg"]})
    return issues


class ValidationFailed(Exception):
    """Raised when a request body breaks one or more validation rules."""

    def __init__(self, issues: List[Issue]):
        if not issues:
            raise ValueError("ValidationFailed requires at least one issue")
        super().__init__(f"{len(issues)} validation issue(s)")
        self.issues = issues


def _invalid_data(issues: List[Issue]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid data", "issues": issues},
    )


async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    return _invalid_data(exc.issues)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Drop FastAPI's leading "body"/"path"/"query" location segment
    errors = []
    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] in {"body", "path", "query"}:
            loc = loc[1:]
        errors.append({"loc": loc, "msg": error.get("msg", "Invalid value")})
    return _invalid_data(issues_from_errors(errors))


async def database_error_handler(request: Request, exc: sqlite3.Error) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(sqlite3.Error, database_error_handler)
