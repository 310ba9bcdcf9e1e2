from typing import TYPE_CHECKING
from ...domain.repositories.marker_repository import MarkerRepository
from ...domain.validation.marker_validator import MarkerValidator
from ...application.services.marker_service import MarkerService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MarkerProvider:
    """Marker service provider - registers marker-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the validator and the marker service.
        Service is created with the repository from container.
        """
        validator = MarkerValidator()
        container.register_singleton(MarkerValidator, validator)

        container.register_singleton(
            MarkerService,
            MarkerService(
                marker_repository=container.get(MarkerRepository),
                validator=validator,
            )
        )
