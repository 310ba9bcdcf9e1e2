from .marker_dto import (
    ErrorResponse,
    MarkerEnvelope,
    MarkerListEnvelope,
    MarkerResponse,
    PositionResponse,
)

__all__ = [
    "ErrorResponse",
    "MarkerEnvelope",
    "MarkerListEnvelope",
    "MarkerResponse",
    "PositionResponse",
]
