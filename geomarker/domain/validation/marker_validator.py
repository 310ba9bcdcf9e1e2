"""
Marker Validator
================

Field- and record-level checks applied to a marker payload before it
reaches storage. Checks run in a fixed order and the first failure wins:

1. lat present and numeric        -> "latitude required"
2. lat within [-90, 90]           -> "latitude out of range"
3. lng present and numeric        -> "longitude required"
4. lng within [-180, 180]         -> "longitude out of range"
5. content present (a string)     -> "content required"
6. trimmed content 1..200 chars   -> "content length invalid"

The validator is a pure function of its input. It never talks to the
store, so it can be unit-tested without a database.
"""
import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from geomarker.domain.constants.marker_fields import MarkerFields, MarkerLimits
from geomarker.domain.exceptions import ValidationError
from geomarker.domain.models.marker import MarkerDraft, Position


LATITUDE_REQUIRED = "latitude required"
LATITUDE_OUT_OF_RANGE = "latitude out of range"
LONGITUDE_REQUIRED = "longitude required"
LONGITUDE_OUT_OF_RANGE = "longitude out of range"
CONTENT_REQUIRED = "content required"
CONTENT_LENGTH_INVALID = "content length invalid"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation run: either a draft or the first error."""
    draft: Optional[MarkerDraft] = None
    field: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, draft: MarkerDraft) -> "ValidationResult":
        return cls(draft=draft)

    @classmethod
    def failure(cls, field: str, error: str) -> "ValidationResult":
        return cls(field=field, error=error)

    def unwrap(self) -> MarkerDraft:
        """
        Return the draft, or raise the recorded failure.

        Raises:
            ValidationError: If the result is not ok
        """
        if self.error is not None:
            raise ValidationError(self.error, field=self.field)
        return self.draft


def _is_number(value: Any) -> bool:
    # bool is an int subclass, but JSON true/false is not a coordinate
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _in_range(value: float, low: float, high: float) -> bool:
    # bounds first: ints beyond float range compare fine but overflow isfinite
    return low <= value <= high and math.isfinite(value)


class MarkerValidator:
    """Validates raw marker payloads and normalizes them into drafts."""

    def __init__(
        self,
        content_min_length: int = MarkerLimits.CONTENT_MIN_LENGTH,
        content_max_length: int = MarkerLimits.CONTENT_MAX_LENGTH,
    ) -> None:
        self._content_min_length = content_min_length
        self._content_max_length = content_max_length

    def check(self, payload: Mapping[str, Any]) -> ValidationResult:
        """
        Run every check in order and report the first failure.

        Args:
            payload: Mapping with optional ``lat``, ``lng`` and ``content`` keys

        Returns:
            ValidationResult holding a normalized draft when ok
        """
        if not isinstance(payload, Mapping):
            return ValidationResult.failure(MarkerFields.LAT, LATITUDE_REQUIRED)

        lat = payload.get(MarkerFields.LAT)
        if not _is_number(lat):
            return ValidationResult.failure(MarkerFields.LAT, LATITUDE_REQUIRED)
        if not _in_range(lat, MarkerLimits.LAT_MIN, MarkerLimits.LAT_MAX):
            return ValidationResult.failure(MarkerFields.LAT, LATITUDE_OUT_OF_RANGE)

        lng = payload.get(MarkerFields.LNG)
        if not _is_number(lng):
            return ValidationResult.failure(MarkerFields.LNG, LONGITUDE_REQUIRED)
        if not _in_range(lng, MarkerLimits.LNG_MIN, MarkerLimits.LNG_MAX):
            return ValidationResult.failure(MarkerFields.LNG, LONGITUDE_OUT_OF_RANGE)

        content = payload.get(MarkerFields.CONTENT)
        if not isinstance(content, str):
            return ValidationResult.failure(MarkerFields.CONTENT, CONTENT_REQUIRED)
        content = content.strip()
        if not self._content_min_length <= len(content) <= self._content_max_length:
            return ValidationResult.failure(MarkerFields.CONTENT, CONTENT_LENGTH_INVALID)

        return ValidationResult.success(
            MarkerDraft(
                position=Position(lat=float(lat), lng=float(lng)),
                content=content,
            )
        )

    def validate(self, payload: Mapping[str, Any]) -> MarkerDraft:
        """
        Validate a payload and return the normalized draft.

        Raises:
            ValidationError: On the first failed check
        """
        return self.check(payload).unwrap()


_default_validator = MarkerValidator()


def validate_marker_payload(payload: Mapping[str, Any]) -> MarkerDraft:
    """Validate ``payload`` with the default limits."""
    return _default_validator.validate(payload)
