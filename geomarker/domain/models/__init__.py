from .marker import Marker, MarkerDraft, Position

__all__ = ["Marker", "MarkerDraft", "Position"]
