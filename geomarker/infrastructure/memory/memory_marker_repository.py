"""
In-Memory Marker Repository
===========================

Process-local implementation of MarkerRepository.

Used when STORAGE_BACKEND=memory and by the test suite. Records live in a
dict keyed by position; the existence check and the insert happen under a
single lock acquisition, which gives the same atomic "insert if position
unused" behaviour as the MongoDB unique index.
"""
import itertools
import threading
import uuid
from typing import Dict, List, Tuple

from geomarker.domain.exceptions import DuplicateKeyError
from geomarker.domain.models.marker import Marker, MarkerDraft
from geomarker.domain.repositories.marker_repository import MarkerRepository
from geomarker.utils.datetime_utils import now


class InMemoryMarkerRepository(MarkerRepository):
    """In-memory implementation of MarkerRepository."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sequence = itertools.count()
        # position key -> (insertion sequence, marker)
        self._markers: Dict[Tuple[float, float], Tuple[int, Marker]] = {}

    def create(self, draft: MarkerDraft) -> Marker:
        """Insert a new marker unless its position is already taken."""
        key = draft.position.as_key()
        with self._lock:
            if key in self._markers:
                raise DuplicateKeyError(draft.lat, draft.lng)
            marker = Marker.from_draft(draft, id=uuid.uuid4().hex, created_at=now())
            self._markers[key] = (next(self._sequence), marker)
        return marker

    def list_all(self) -> List[Marker]:
        """Snapshot of all markers, newest first."""
        with self._lock:
            entries = list(self._markers.values())
        entries.sort(key=lambda entry: (entry[1].created_at, entry[0]), reverse=True)
        return [marker for _, marker in entries]

    def __len__(self) -> int:
        with self._lock:
            return len(self._markers)
