from .marker_validator import (
    MarkerValidator,
    ValidationResult,
    validate_marker_payload,
)

__all__ = ["MarkerValidator", "ValidationResult", "validate_marker_payload"]
