"""
List Markers Use Case
=====================

Business use case for reading every stored marker.
"""
from typing import List

from geomarker.domain.models.marker import Marker
from geomarker.domain.repositories.marker_repository import MarkerRepository


class ListMarkersUseCase:
    """Use case for listing all markers, newest first."""

    def __init__(self, marker_repository: MarkerRepository):
        self._repository = marker_repository

    def execute(self) -> List[Marker]:
        return self._repository.list_all()
