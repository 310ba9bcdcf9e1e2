from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.marker_repository import MarkerRepository
from ...infrastructure.db.mongo_marker_repository import MongoMarkerRepository
from ...infrastructure.memory.memory_marker_repository import InMemoryMarkerRepository
from .database_provider import MONGO_CONNECTION_KEY

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the marker repository implementation.
        A repository registered before setup (e.g. by tests) is kept as is.
        """
        if container.has(MarkerRepository):
            return

        settings = container.get(Settings)
        backend = settings.storage_backend

        # Domain interface -> Infrastructure implementation
        if backend == "mongo":
            repository = MongoMarkerRepository.from_connection(
                container.get(MONGO_CONNECTION_KEY),
                settings.markers_collection,
            )
        elif backend == "memory":
            repository = InMemoryMarkerRepository()
        else:
            raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'mongo' or 'memory')")

        container.register_singleton(MarkerRepository, repository)
