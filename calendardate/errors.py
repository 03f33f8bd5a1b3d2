"""calendardate exception hierarchy.

All calendardate-specific exceptions inherit from CalendarDateError.
"""

from __future__ import annotations


class CalendarDateError(Exception):
    """Base exception for all calendardate errors."""

    pass


class ValidationError(CalendarDateError):
    """Invalid input values.

    Raised when a date component or ordinal cannot describe a calendar
    date.

    Examples:
        - Month value outside 1-12
    """

    pass


class RangeError(ValidationError):
    """Value outside the supported date range.

    The supported range is 0001-01-01 through 9999-12-31.

    Examples:
        - Ordinal value below 366 or above 3652424
        - Non-integer ordinal value
        - Adding days that moves past 9999-12-31
        - Year outside 1-9999
    """

    pass


class InvalidDayError(ValidationError):
    """Day of month does not exist.

    Examples:
        - Day 0
        - February 29 in a non-leap year
        - April 31
    """

    pass


class ParseError(CalendarDateError):
    """Failed to parse string representation.

    Raised when a string is not in YYYY-MM-DD or YYYYMMDD form, or
    when its fields do not form a valid date.

    Examples:
        - "hello"
        - "2016,01,01"
        - "2016-o1-o1"
    """

    pass


class TimezoneError(CalendarDateError):
    """Timestamp does not represent a UTC midnight.

    Calendar dates are only converted from instants at exactly
    00:00:00.000 UTC.

    Examples:
        - Naive datetime
        - 2024-01-15T00:00:00-08:00 (local, not UTC, midnight)
        - 2024-01-15T05:00:00Z
    """

    pass


class FormatterError(CalendarDateError):
    """Formatter is not configured for the UTC time zone.

    Examples:
        - PatternFormatter("%Y", time_zone="America/Vancouver")
    """

    pass


__all__ = [
    "CalendarDateError",
    "ValidationError",
    "RangeError",
    "InvalidDayError",
    "ParseError",
    "TimezoneError",
    "FormatterError",
]
