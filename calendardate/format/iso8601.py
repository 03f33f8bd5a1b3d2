"""ISO 8601 formatting and parsing.

This module provides functions for converting calendar dates to and from
ISO 8601 calendar-date strings.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a CalendarDate.
    format_iso8601: Format a CalendarDate as an ISO 8601 string.

Accepted input formats:
    - YYYY-MM-DD (extended format)
    - YYYYMMDD (basic format)

Every field must be made of ASCII digits. Signs, whitespace, ordinal
dates (YYYY-DDD) and week dates (YYYY-Www-D) are rejected.

Output is always the extended format, zero padded: YYYY-MM-DD.

Examples:
    >>> from calendardate.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2024-01-15")
    CalendarDate.create(2024, 1, 15)

    >>> parse_iso8601("20240115")
    CalendarDate.create(2024, 1, 15)

    >>> format_iso8601(parse_iso8601("0123-04-05"))
    '0123-04-05'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from calendardate._internal.calendar import value_to_ymd
from calendardate.errors import ParseError, ValidationError

if TYPE_CHECKING:
    from calendardate.core.date import CalendarDate

_EXTENDED_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
_BASIC_PATTERN = re.compile(r"([0-9]{4})([0-9]{2})([0-9]{2})")


def parse_iso8601(s: str) -> "CalendarDate":
    """Parse an ISO 8601 calendar-date string.

    Args:
        s: A string in YYYY-MM-DD or YYYYMMDD form.

    Returns:
        The parsed CalendarDate.

    Raises:
        ParseError: If the string is not in either accepted form, or its
            fields do not form a date between 0001-01-01 and 9999-12-31.

    Examples:
        >>> parse_iso8601("2016-02-29")
        CalendarDate.create(2016, 2, 29)

        >>> parse_iso8601("2016-o1-o1")
        Traceback (most recent call last):
        ...
        calendardate.errors.ParseError: date string not in YYYY-MM-DD or YYYYMMDD format: '2016-o1-o1'
    """
    from calendardate.core.date import CalendarDate

    if not isinstance(s, str):
        raise ParseError(f"expected str, got {type(s).__name__}")

    if len(s) == 10:
        match = _EXTENDED_PATTERN.fullmatch(s)
    elif len(s) == 8:
        match = _BASIC_PATTERN.fullmatch(s)
    else:
        match = None

    if match is None:
        raise ParseError(
            f"date string not in YYYY-MM-DD or YYYYMMDD format: {s!r}"
        )

    year, month, day = (int(group) for group in match.groups())
    try:
        return CalendarDate.create(year, month, day)
    except ValidationError as e:
        raise ParseError(f"invalid date {s!r}: {e}") from e


def format_iso8601(value: "CalendarDate") -> str:
    """Format a CalendarDate as YYYY-MM-DD.

    Args:
        value: The date to format.

    Returns:
        ISO 8601 extended calendar-date string.

    Raises:
        TypeError: If value is not a CalendarDate.

    Examples:
        >>> from calendardate import CalendarDate
        >>> format_iso8601(CalendarDate.create(1, 1, 1))
        '0001-01-01'
    """
    from calendardate.core.date import CalendarDate

    if not isinstance(value, CalendarDate):
        raise TypeError(f"expected CalendarDate, got {type(value).__name__}")

    year, month, day = value_to_ymd(value.value)
    return f"{year:04d}-{month:02d}-{day:02d}"


__all__ = ["parse_iso8601", "format_iso8601"]
