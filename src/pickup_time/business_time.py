"""Business-time duration calculation.

Business time is wall-clock time that falls on Monday through Friday. Saturday
and Sunday calendar days (in UTC) never contribute, not even partially, so an
interval that starts or ends inside a weekend is only credited from the next
Monday midnight or up to the previous Saturday midnight.
"""

from __future__ import annotations

import logging
from datetime import datetime, time, timedelta

from .timestamps import BUSINESS_TIMEZONE, require_utc

logger = logging.getLogger(__name__)

_SATURDAY = 5
_SUNDAY = 6


def is_weekend(value: datetime) -> bool:
    """Return ``True`` when ``value`` falls on a Saturday or Sunday in UTC."""
    return value.astimezone(BUSINESS_TIMEZONE).weekday() in (_SATURDAY, _SUNDAY)


def _next_midnight(value: datetime) -> datetime:
    return datetime.combine(value.date() + timedelta(days=1), time.min, tzinfo=BUSINESS_TIMEZONE)


def business_seconds_between(start: datetime, end: datetime) -> int:
    """Compute elapsed seconds between two instants excluding weekend days.

    The interval is walked one calendar day at a time. Each weekday slice from
    the cursor to the next midnight is counted, then the final partial day up
    to ``end`` is counted when it is a weekday. Fractional seconds are
    truncated.

    Inverted or empty intervals (``end <= start``) yield ``0``.

    Raises:
        DataValidationError: If either bound is missing or not a datetime.
    """
    start = require_utc(start, "start")
    end = require_utc(end, "end")

    if end <= start:
        logger.debug(
            "Business duration is zero for non-positive interval",
            extra={"start": start.isoformat(), "end": end.isoformat()},
        )
        return 0

    total = timedelta(0)
    cursor = start

    while cursor.date() < end.date():
        next_midnight = _next_midnight(cursor)
        if not is_weekend(cursor):
            total += next_midnight - cursor
        cursor = next_midnight

    if not is_weekend(cursor):
        total += end - cursor

    return total // timedelta(seconds=1)
