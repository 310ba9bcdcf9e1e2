"""
Marker Service
==============

Application service that coordinates marker-related operations.
This service orchestrates the marker use cases.
"""
from typing import Any, List, Mapping, Optional

from geomarker.domain.models.marker import Marker
from geomarker.domain.repositories.marker_repository import MarkerRepository
from geomarker.domain.validation.marker_validator import MarkerValidator
from geomarker.application.use_cases.marker.create_marker import CreateMarkerUseCase
from geomarker.application.use_cases.marker.list_markers import ListMarkersUseCase


class MarkerService:
    """
    Application service for marker operations.

    This service coordinates the use cases and provides
    a high-level interface for marker management.
    """

    def __init__(self, marker_repository: MarkerRepository, validator: Optional[MarkerValidator] = None):
        """
        Initialize service with repository.

        Args:
            marker_repository: Repository for marker persistence
            validator: Payload validator shared by the create use case
        """
        self._repository = marker_repository
        self._create_use_case = CreateMarkerUseCase(marker_repository, validator)
        self._list_use_case = ListMarkersUseCase(marker_repository)

    def create_marker(self, payload: Mapping[str, Any]) -> Marker:
        """
        Validate and store a marker.

        Args:
            payload: Raw request data with lat, lng and content

        Returns:
            Persisted marker entity
        """
        return self._create_use_case.execute(payload)

    def list_markers(self) -> List[Marker]:
        """
        List all markers, most recent first.

        Returns:
            List of marker entities
        """
        return self._list_use_case.execute()

    def storage_available(self) -> bool:
        """Whether the marker store is reachable."""
        return self._repository.ping()
