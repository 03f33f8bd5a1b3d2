"""Calendar date formatting and parsing.

This module provides functions for converting calendar dates to and from
string representations:
    - ISO 8601 formatting and parsing
    - strftime-style formatting
    - Delegation to external (locale-aware) formatters

Functions:
    parse_iso8601: Parse YYYY-MM-DD or YYYYMMDD string.
    format_iso8601: Format CalendarDate as YYYY-MM-DD.
    strftime: Format CalendarDate using a strftime pattern.
    is_utc_zone: Check a time zone name or object is UTC.
    require_utc_formatter: Check a formatter renders in UTC.

Classes:
    DateFormatter: Protocol for external formatters.
    PatternFormatter: strftime-pattern formatter bound to a time zone.

Examples:
    >>> from calendardate.format import parse_iso8601, format_iso8601

    >>> d = parse_iso8601("20240115")
    >>> d.year
    2024

    >>> format_iso8601(d)
    '2024-01-15'
"""

from __future__ import annotations

from calendardate.format.formatter import (
    DateFormatter,
    PatternFormatter,
    is_utc_zone,
    require_utc_formatter,
)
from calendardate.format.iso8601 import format_iso8601, parse_iso8601
from calendardate.format.strftime import strftime

__all__: list[str] = [
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    # strftime
    "strftime",
    # Delegated formatting
    "DateFormatter",
    "PatternFormatter",
    "is_utc_zone",
    "require_utc_formatter",
]
