"""
Domain Exceptions
=================

Typed failures raised by the validator and the marker store.
The API layer maps them onto HTTP responses; the domain never recovers from them.
"""
from typing import Optional


class MarkerError(Exception):
    """
    Base exception for marker operations.

    Subclasses carry the HTTP status the API layer should answer with and
    a message that is safe to return to the client.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(MarkerError):
    """Malformed or out-of-range marker input. Always client-caused."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class DuplicateKeyError(MarkerError):
    """A marker already exists at the requested position."""

    status_code = 400

    def __init__(self, lat: float, lng: float) -> None:
        super().__init__("a marker already exists at this position")
        self.lat = lat
        self.lng = lng


class StoreError(MarkerError):
    """
    Underlying storage unavailable or an I/O failure.

    The original exception is kept on ``cause`` for logging; only the
    generic ``message`` is ever sent to clients.
    """

    status_code = 500

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
