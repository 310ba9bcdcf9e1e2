"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All datetime operations use the timezone configured in geomarker.core.config.

Functions:
- now(): Returns timezone-aware datetime object
- as_app_timezone(): Attach/convert a datetime to the application timezone

MongoDB stores BSON dates in UTC with millisecond precision and hands them
back as naive datetimes, so values read from storage go through
as_app_timezone() before they reach the domain.
"""
import logging
from datetime import datetime, timezone as dt_timezone, tzinfo
import zoneinfo

from geomarker.core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> tzinfo:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    settings = get_settings()
    tz_str = settings.timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        # Fallback to UTC if timezone is invalid
        logger.warning("Invalid timezone '%s', falling back to UTC", tz_str)
        return dt_timezone.utc


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    return datetime.now(_get_app_timezone())


def truncate_to_millis(dt: datetime) -> datetime:
    """Drop sub-millisecond precision (BSON dates are millisecond based)."""
    return dt.replace(microsecond=(dt.microsecond // 1000) * 1000)


def as_app_timezone(dt: datetime) -> datetime:
    """
    Express a datetime in the application timezone.
    Naive values are treated as UTC, which is how MongoDB returns them.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(_get_app_timezone())

