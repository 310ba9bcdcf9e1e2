# Standard library imports
import logging
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    MarkerProvider,
)
from ..core.config import Settings
from ..domain.repositories.marker_repository import MarkerRepository

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    One container is built per application instance; its lifecycle follows
    the application's startup and shutdown instead of module import.

    Registration order is important:
    1. Settings
    2. Database connections (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depends on database
    4. Services (MarkerProvider) - depend on repositories
    """

    def __init__(self, settings: Settings, repository: Optional[MarkerRepository] = None) -> None:
        super().__init__()
        self.register_singleton(Settings, settings)
        if repository is not None:
            self.register_singleton(MarkerRepository, repository)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register services (depends on repositories)
        MarkerProvider.register(self)

    def startup(self) -> None:
        """
        Prepare storage before serving requests.

        Raises:
            StoreError: If storage cannot be reached or indexed
        """
        repository = self.get(MarkerRepository)
        logger.info("Preparing marker store (%s)", type(repository).__name__)
        repository.ensure_indexes()

    def shutdown(self) -> None:
        """Release storage resources."""
        self.get(MarkerRepository).close()
