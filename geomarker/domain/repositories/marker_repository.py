"""
Marker Repository Interface
===========================

Abstract interface for marker data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List

from geomarker.domain.models.marker import Marker, MarkerDraft


class MarkerRepository(ABC):
    """
    Abstract repository for marker persistence operations.

    This interface defines the contract for marker data access.
    Concrete implementations should be in the infrastructure layer.

    Implementations must enforce position uniqueness inside the storage
    layer itself (unique index, conditional insert under a lock, ...),
    never as a read followed by a separate write.
    """

    @abstractmethod
    def create(self, draft: MarkerDraft) -> Marker:
        """
        Persist a new marker with a fresh id and the current time.

        Args:
            draft: Validated marker payload

        Returns:
            Persisted marker entity

        Raises:
            DuplicateKeyError: If a marker already exists at the same position
            StoreError: If the underlying storage fails
        """
        pass

    @abstractmethod
    def list_all(self) -> List[Marker]:
        """
        Return every stored marker, most recently created first.

        Returns:
            List of marker entities

        Raises:
            StoreError: If the underlying storage fails
        """
        pass

    def ensure_indexes(self) -> None:
        """Prepare storage constraints. Called once at application start."""
        return None

    def ping(self) -> bool:
        """Report whether the underlying storage is reachable."""
        return True

    def close(self) -> None:
        """Release storage resources. Called once at application shutdown."""
        return None
