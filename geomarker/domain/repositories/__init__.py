from .marker_repository import MarkerRepository

__all__ = ["MarkerRepository"]
