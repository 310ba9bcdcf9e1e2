from .create_marker import CreateMarkerUseCase
from .list_markers import ListMarkersUseCase

__all__ = ["CreateMarkerUseCase", "ListMarkersUseCase"]
