"""
Marker Controller
=================

FastAPI controller for marker endpoints.

Handlers are plain ``def`` functions: FastAPI runs them in its threadpool,
so blocking store calls do not stall the event loop and concurrent
requests reach the store in parallel.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from geomarker.api.request_body import read_json_object
from geomarker.api.v1.dependencies import get_marker_service
from geomarker.application.dto.marker_dto import (
    ErrorResponse,
    MarkerEnvelope,
    MarkerListEnvelope,
    MarkerResponse,
)
from geomarker.application.services.marker_service import MarkerService

router = APIRouter(tags=["markers"])


@router.get(
    "",
    response_model=MarkerListEnvelope,
    summary="List markers",
    description="Get every stored marker, most recently created first.",
    responses={500: {"model": ErrorResponse, "description": "Marker store unavailable"}},
)
def list_markers(
    service: MarkerService = Depends(get_marker_service),
) -> MarkerListEnvelope:
    """List all markers."""
    markers = service.list_markers()
    return MarkerListEnvelope(data=[MarkerResponse.from_entity(marker) for marker in markers])


@router.post(
    "",
    response_model=MarkerEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a marker",
    description="""
    Create a marker from ``{lat, lng, content}``.

    - lat must be within [-90, 90], lng within [-180, 180]
    - content is trimmed and must be 1 to 200 characters long
    - only one marker may exist at a given (lat, lng)
    """,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or position already taken"},
        413: {"model": ErrorResponse, "description": "Request body too large"},
        500: {"model": ErrorResponse, "description": "Marker store unavailable"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": {
                            "lat": {"type": "number"},
                            "lng": {"type": "number"},
                            "content": {"type": "string"},
                        },
                        "required": ["lat", "lng", "content"],
                    },
                    "example": {"lat": 45.0, "lng": -122.0, "content": "hello"},
                }
            },
        }
    },
)
def create_marker(
    payload: Dict[str, Any] = Depends(read_json_object),
    service: MarkerService = Depends(get_marker_service),
) -> MarkerEnvelope:
    """Create a marker."""
    marker = service.create_marker(payload)
    return MarkerEnvelope(data=MarkerResponse.from_entity(marker))
