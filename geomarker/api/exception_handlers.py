"""
Exception Handlers
==================

Translate domain failures into JSON responses.

Client errors (4xx) answer ``{"status": "fail", "message": ...}`` with the
specific message; server errors (5xx) answer ``{"status": "error", ...}``
with a generic message. Store causes are logged, never returned.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from geomarker.domain.exceptions import MarkerError, StoreError

logger = logging.getLogger(__name__)


async def marker_error_handler(request: Request, exc: MarkerError) -> JSONResponse:
    """Handle every MarkerError subclass."""
    if isinstance(exc, StoreError):
        logger.error(
            "%s %s failed: %s (cause: %r)",
            request.method,
            request.url.path,
            exc.message,
            exc.cause,
        )
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "status": "error" if exc.status_code >= 500 else "fail",
            "message": exc.message,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers on the application."""
    app.add_exception_handler(MarkerError, marker_error_handler)
