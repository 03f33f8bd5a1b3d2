"""Epoch conversion utilities for calendar dates.

This module provides functions for converting between calendar dates and
Unix timestamps (seconds, milliseconds). A calendar date maps to the
timestamp of midnight UTC on that day.

Functions:
    to_epoch_seconds: Convert CalendarDate to Unix seconds.
    from_epoch_seconds: Create CalendarDate from Unix seconds.
    to_epoch_ms: Convert CalendarDate to Unix milliseconds.
    from_epoch_ms: Create CalendarDate from Unix milliseconds.

The Unix epoch 1970-01-01 is ordinal 719528.

Examples:
    >>> from calendardate import CalendarDate
    >>> from calendardate.convert import to_epoch_ms, from_epoch_ms

    >>> to_epoch_ms(CalendarDate.create(1970, 1, 2))
    86400000

    >>> from_epoch_ms(-86400000)
    CalendarDate.create(1969, 12, 31)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calendardate._internal.constants import (
    MILLIS_PER_DAY,
    SECONDS_PER_DAY,
    UNIX_EPOCH_VALUE,
)
from calendardate.errors import TimezoneError

if TYPE_CHECKING:
    from calendardate.core.date import CalendarDate


def to_epoch_seconds(date: "CalendarDate") -> int:
    """Convert a CalendarDate to Unix seconds at midnight UTC.

    Examples:
        >>> from calendardate import CalendarDate
        >>> to_epoch_seconds(CalendarDate.create(1970, 1, 1))
        0
    """
    return date.to_epoch_seconds()


def to_epoch_ms(date: "CalendarDate") -> int:
    """Convert a CalendarDate to Unix milliseconds at midnight UTC.

    Examples:
        >>> from calendardate import CalendarDate
        >>> to_epoch_ms(CalendarDate.create(1969, 12, 31))
        -86400000
    """
    return date.to_epoch_ms()


def _from_epoch(timestamp: int, per_day: int, unit: str) -> "CalendarDate":
    from calendardate.core.date import CalendarDate

    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise TypeError(f"{unit} must be an int, got {type(timestamp).__name__}")

    days, remainder = divmod(timestamp, per_day)
    if remainder:
        raise TimezoneError(
            f"{timestamp} {unit} is not midnight UTC; use UTC for calendar dates"
        )
    return CalendarDate(days + UNIX_EPOCH_VALUE)


def from_epoch_seconds(seconds: int) -> "CalendarDate":
    """Create a CalendarDate from Unix seconds.

    Args:
        seconds: Seconds since 1970-01-01 00:00:00 UTC; must be a whole
            number of days.

    Raises:
        TypeError: If seconds is not an int.
        TimezoneError: If seconds is not a multiple of 86400.
        RangeError: If the day is out of range.

    Examples:
        >>> from_epoch_seconds(86400)
        CalendarDate.create(1970, 1, 2)
    """
    return _from_epoch(seconds, SECONDS_PER_DAY, "seconds")


def from_epoch_ms(ms: int) -> "CalendarDate":
    """Create a CalendarDate from Unix milliseconds.

    Args:
        ms: Milliseconds since 1970-01-01 00:00:00 UTC; must be a whole
            number of days.

    Raises:
        TypeError: If ms is not an int.
        TimezoneError: If ms is not a multiple of 86400000.
        RangeError: If the day is out of range.

    Examples:
        >>> from_epoch_ms(0)
        CalendarDate.create(1970, 1, 1)
    """
    return _from_epoch(ms, MILLIS_PER_DAY, "milliseconds")


__all__ = [
    "to_epoch_seconds",
    "from_epoch_seconds",
    "to_epoch_ms",
    "from_epoch_ms",
]
