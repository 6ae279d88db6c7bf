"""
Global exception handlers: every failure leaves as an ``{"error": ...}`` envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from usersearch.exceptions import APIException, ErrorCode

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(APIException)
    async def api_error_handler(request: Request, exc: APIException):
        logger.error(
            f"Search error on {request.url.path}: {exc.message}",
            extra={"status_code": exc.status_code},
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ErrorCode.INTERNAL.value},
        )
