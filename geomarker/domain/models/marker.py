"""
Marker Model
============

Domain model representing a marker in the system.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A (latitude, longitude) pair. Two markers never share one."""
    lat: float
    lng: float

    def as_key(self) -> tuple:
        """Hashable key used for uniqueness checks."""
        return (self.lat, self.lng)


@dataclass(frozen=True)
class MarkerDraft:
    """
    Validated, normalized marker payload.

    Produced by the validator; not yet assigned an id or a creation time.
    """
    position: Position
    content: str

    @property
    def lat(self) -> float:
        return self.position.lat

    @property
    def lng(self) -> float:
        return self.position.lng


@dataclass(frozen=True)
class Marker:
    """
    Marker domain model.

    A persisted record pairing a geographic position with short text content.
    Markers are immutable once created; the store assigns id and created_at.
    """
    id: str
    position: Position
    content: str
    created_at: datetime

    @classmethod
    def from_draft(cls, draft: MarkerDraft, id: str, created_at: datetime) -> "Marker":
        """Build the persisted form of a draft."""
        return cls(
            id=id,
            position=draft.position,
            content=draft.content,
            created_at=created_at,
        )
