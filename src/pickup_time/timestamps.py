"""Timestamp parsing and normalization helpers.

Every instant handled by the pickup-time core is normalized to UTC, which is the
zone used for calendar days and weekdays in business-time computation.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from .errors import DataValidationError

BUSINESS_TIMEZONE = timezone.utc


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub ISO8601 timestamp into a UTC datetime.

    Returns ``None`` for empty values.

    Raises:
        DataValidationError: If the value is not a valid ISO8601 timestamp.
    """
    if not value:
        return None

    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise DataValidationError(f"Invalid timestamp: {value!r}") from exc

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=BUSINESS_TIMEZONE)
    return parsed.astimezone(BUSINESS_TIMEZONE)


def format_timestamp(value: datetime) -> str:
    """Format a datetime as UTC ISO8601 with a ``Z`` suffix."""
    return value.astimezone(BUSINESS_TIMEZONE).isoformat().replace("+00:00", "Z")


def require_utc(value: Any, field_name: str) -> datetime:
    """Return ``value`` as an aware UTC datetime or fail on malformed input.

    Naive datetimes are interpreted as UTC.

    Raises:
        DataValidationError: If ``value`` is missing or not a datetime.
    """
    if value is None:
        raise DataValidationError(f"Missing required timestamp '{field_name}'.")
    if not isinstance(value, datetime):
        raise DataValidationError(
            f"Expected a datetime for '{field_name}', got {type(value).__name__}: {value!r}"
        )

    if value.tzinfo is None:
        return value.replace(tzinfo=BUSINESS_TIMEZONE)
    return value.astimezone(BUSINESS_TIMEZONE)
