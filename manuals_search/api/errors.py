# manuals_search/api/errors.py
"""Standardized API error responses."""

import logging
import uuid

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..errors import ManualsError
from .schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
) -> JSONResponse:
    """Return an ``{"error": message}`` response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message or "Unknown error").model_dump(exclude_none=True),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the app-wide exception handlers."""

    @app.exception_handler(ManualsError)
    async def manuals_error_handler(request: Request, exc: ManualsError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return error_response(str(exc))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())[:8]
        logger.exception("Unhandled exception [%s]: %s", error_id, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Internal Server Error", error_id=error_id).model_dump(),
        )
