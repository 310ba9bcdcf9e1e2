"""
Create Marker Use Case
======================

Business use case for validating and storing a new marker.
"""
import logging
from typing import Any, Mapping, Optional

from geomarker.domain.models.marker import Marker
from geomarker.domain.repositories.marker_repository import MarkerRepository
from geomarker.domain.validation.marker_validator import MarkerValidator

logger = logging.getLogger(__name__)


class CreateMarkerUseCase:
    """
    Use case for creating a marker.

    Validation runs first; the repository is only reached with a
    normalized draft, so invalid input never causes a store call.
    """

    def __init__(self, marker_repository: MarkerRepository, validator: Optional[MarkerValidator] = None):
        """
        Initialize use case with repository.

        Args:
            marker_repository: Repository for marker persistence
            validator: Payload validator (default limits when omitted)
        """
        self._repository = marker_repository
        self._validator = validator or MarkerValidator()

    def execute(self, payload: Mapping[str, Any]) -> Marker:
        """
        Execute the create marker use case.

        Args:
            payload: Raw request data with lat, lng and content

        Returns:
            Persisted marker entity

        Raises:
            ValidationError: If input validation fails
            DuplicateKeyError: If the position is already taken
            StoreError: If the store fails
        """
        draft = self._validator.validate(payload)
        marker = self._repository.create(draft)
        logger.info("Marker %s created at (%s, %s)", marker.id, marker.position.lat, marker.position.lng)
        return marker
