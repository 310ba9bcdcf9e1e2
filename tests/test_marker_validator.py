# =============================================================================
# tests/test_marker_validator.py - Marker Validator Tests
# =============================================================================
# The validator is pure, so these tests need no store.
#
# Run with: pytest tests/test_marker_validator.py -v
# =============================================================================

import math

import pytest

from geomarker.domain.exceptions import ValidationError
from geomarker.domain.models.marker import MarkerDraft, Position
from geomarker.domain.validation.marker_validator import (
    CONTENT_LENGTH_INVALID,
    CONTENT_REQUIRED,
    LATITUDE_OUT_OF_RANGE,
    LATITUDE_REQUIRED,
    LONGITUDE_OUT_OF_RANGE,
    LONGITUDE_REQUIRED,
    MarkerValidator,
    validate_marker_payload,
)


@pytest.fixture
def validator():
    return MarkerValidator()


def payload(**overrides):
    data = {"lat": 10.0, "lng": 20.0, "content": "hello"}
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not ...}


# =============================================================================
# Successful validation
# =============================================================================

class TestValidPayloads:
    """Payloads that pass every check."""

    def test_returns_normalized_draft(self, validator):
        draft = validator.validate({"lat": 45.0, "lng": -122.0, "content": " hello "})

        assert draft == MarkerDraft(position=Position(lat=45.0, lng=-122.0), content="hello")

    def test_integer_coordinates_become_floats(self, validator):
        draft = validator.validate(payload(lat=45, lng=-122))

        assert isinstance(draft.lat, float)
        assert isinstance(draft.lng, float)

    @pytest.mark.parametrize("lat", [-90, -90.0, 0, 90, 90.0])
    def test_latitude_bounds_are_inclusive(self, validator, lat):
        assert validator.validate(payload(lat=lat)).lat == float(lat)

    @pytest.mark.parametrize("lng", [-180, -180.0, 0, 180, 180.0])
    def test_longitude_bounds_are_inclusive(self, validator, lng):
        assert validator.validate(payload(lng=lng)).lng == float(lng)

    def test_content_of_exactly_200_characters(self, validator):
        assert len(validator.validate(payload(content="x" * 200)).content) == 200

    def test_length_is_measured_after_trimming(self, validator):
        draft = validator.validate(payload(content="   " + "x" * 200 + "\n\t"))

        assert draft.content == "x" * 200

    def test_unknown_fields_are_ignored(self, validator):
        draft = validator.validate(payload(id="client-chosen", extra=True))

        assert draft.content == "hello"

    def test_module_level_helper(self):
        assert validate_marker_payload(payload()).position == Position(10.0, 20.0)


# =============================================================================
# Failed validation
# =============================================================================

class TestInvalidPayloads:
    """Every check produces its own message."""

    @pytest.mark.parametrize("lat", [..., None, "10", True, [10]])
    def test_latitude_required(self, validator, lat):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(lat=lat))

        assert exc_info.value.message == LATITUDE_REQUIRED
        assert exc_info.value.field == "lat"

    @pytest.mark.parametrize("lat", [-90.0001, 90.0001, -1000, 1e9, 10**400, -10**400, math.inf, -math.inf, math.nan])
    def test_latitude_out_of_range(self, validator, lat):
        with pytest.raises(ValidationError, match=LATITUDE_OUT_OF_RANGE):
            validator.validate(payload(lat=lat))

    @pytest.mark.parametrize("lng", [..., None, "20", False, {"v": 1}])
    def test_longitude_required(self, validator, lng):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(lng=lng))

        assert exc_info.value.message == LONGITUDE_REQUIRED
        assert exc_info.value.field == "lng"

    @pytest.mark.parametrize("lng", [-180.5, 180.5, 360, 10**400, -10**400, math.nan])
    def test_longitude_out_of_range(self, validator, lng):
        with pytest.raises(ValidationError, match=LONGITUDE_OUT_OF_RANGE):
            validator.validate(payload(lng=lng))

    @pytest.mark.parametrize("content", [..., None, 42, ["hello"]])
    def test_content_required(self, validator, content):
        with pytest.raises(ValidationError) as exc_info:
            validator.validate(payload(content=content))

        assert exc_info.value.message == CONTENT_REQUIRED
        assert exc_info.value.field == "content"

    @pytest.mark.parametrize("content", ["", "   ", "\n\t ", "x" * 201, " " + "y" * 250 + " "])
    def test_content_length_invalid(self, validator, content):
        with pytest.raises(ValidationError, match=CONTENT_LENGTH_INVALID):
            validator.validate(payload(content=content))

    def test_checks_run_in_order(self, validator):
        """Latitude problems are reported before longitude and content problems."""
        result = validator.check({"lat": 100.0, "lng": 500.0, "content": ""})

        assert result.error == LATITUDE_OUT_OF_RANGE

    def test_empty_payload_reports_latitude_first(self, validator):
        assert validator.check({}).error == LATITUDE_REQUIRED


# =============================================================================
# Structured result
# =============================================================================

class TestValidationResult:
    """check() reports failures without raising."""

    def test_ok_result_carries_draft(self, validator):
        result = validator.check(payload())

        assert result.ok
        assert result.error is None
        assert result.draft.content == "hello"

    def test_failed_result_carries_field_and_reason(self, validator):
        result = validator.check(payload(lng=200))

        assert not result.ok
        assert result.draft is None
        assert result.field == "lng"
        assert result.error == LONGITUDE_OUT_OF_RANGE

    def test_unwrap_raises_recorded_failure(self, validator):
        result = validator.check(payload(content=" "))

        with pytest.raises(ValidationError, match=CONTENT_LENGTH_INVALID):
            result.unwrap()

    def test_custom_content_limit(self):
        strict = MarkerValidator(content_max_length=5)

        assert strict.check(payload(content="123456")).error == CONTENT_LENGTH_INVALID
        assert strict.check(payload(content="12345")).ok
