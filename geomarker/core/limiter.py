"""
Rate limiter
============

Per-client-IP throttling built on slowapi (on top of ``limits``).

``create_limiter`` builds the Limiter for one application instance; main.py
attaches it to ``app.state.limiter`` and registers ``SlowAPIMiddleware``, so
the default limit applies to every route without per-route decorators.
"""
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from geomarker.core.config import Settings

RATE_LIMIT_MESSAGE = "Too many requests, please try again later"


def create_limiter(settings: Settings) -> Limiter:
    """Limiter with the configured default limit (100/minute unless overridden)."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Answer throttled requests with a JSON 429 body."""
    return JSONResponse(
        status_code=429,
        content={
            "status": "fail",
            "code": 429,
            "message": RATE_LIMIT_MESSAGE,
        },
    )
