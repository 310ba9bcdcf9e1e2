from .memory_marker_repository import InMemoryMarkerRepository

__all__ = ["InMemoryMarkerRepository"]
