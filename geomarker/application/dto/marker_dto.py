"""
Marker DTO
==========

Pydantic models for marker API responses.

Field names follow the public JSON shape ``{id, position: {lat, lng}, content, createdAt}``.
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from geomarker.domain.models.marker import Marker


class PositionResponse(BaseModel):
    """DTO for a marker position."""
    lat: float = Field(..., description="Latitude in degrees, -90..90")
    lng: float = Field(..., description="Longitude in degrees, -180..180")


class MarkerResponse(BaseModel):
    """DTO for marker data."""
    id: str
    position: PositionResponse
    content: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "6650c1f2a1b2c3d4e5f60718",
                "position": {"lat": 45.0, "lng": -122.0},
                "content": "hello",
                "createdAt": "2025-12-20T09:11:50.840Z",
            }
        },
    )

    @classmethod
    def from_entity(cls, marker: Marker) -> "MarkerResponse":
        return cls(
            id=marker.id,
            position=PositionResponse(lat=marker.position.lat, lng=marker.position.lng),
            content=marker.content,
            created_at=marker.created_at,
        )


class MarkerEnvelope(BaseModel):
    """Success envelope around a single marker."""
    status: str = "success"
    data: MarkerResponse


class MarkerListEnvelope(BaseModel):
    """Success envelope around a list of markers."""
    status: str = "success"
    data: List[MarkerResponse]


class ErrorResponse(BaseModel):
    """Body returned for failed requests."""
    status: str = Field(..., description="'fail' for client errors, 'error' for server errors")
    message: str
