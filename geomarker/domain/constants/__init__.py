from .marker_fields import MarkerFields, MarkerLimits

__all__ = ["MarkerFields", "MarkerLimits"]
