"""calendardate: An immutable calendar-date value type.

calendardate represents days, not instants. A CalendarDate has no time of
day and no time zone, which removes the off-by-one-day bugs that appear
when calendar dates are stored as zoned timestamps.

Dates span 0001-01-01 through 9999-12-31 in the proleptic Gregorian
calendar and are stored as a single integer ordinal.

Core Types:
    CalendarDate: Calendar date (year, month, day)
    D: Shorthand for CalendarDate.from_string

Units:
    Month: Month of the year (JAN=1 .. DEC=12)
    Weekday: Day of the week (MON=0 .. SUN=6)

Format Functions:
    parse_iso8601: Parse YYYY-MM-DD or YYYYMMDD
    format_iso8601: Format as YYYY-MM-DD
    PatternFormatter: strftime-pattern formatter for CalendarDate.format()

Exceptions:
    CalendarDateError: Base exception
    ValidationError: Invalid input values
    RangeError: Outside 0001-01-01 .. 9999-12-31
    InvalidDayError: Day does not exist in the month
    ParseError: Failed to parse string
    TimezoneError: Timestamp is not midnight UTC
    FormatterError: Formatter is not configured for UTC

Example:
    >>> from calendardate import CalendarDate, D
    >>> d = D("2000-12-31")
    >>> d.add_months(2)
    CalendarDate.create(2001, 2, 28)
    >>> d.to_epoch_ms()
    978220800000
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from calendardate.core.date import CalendarDate, D

# Units
from calendardate.units.month import Month
from calendardate.units.weekday import Weekday

# Exceptions
from calendardate.errors import (
    CalendarDateError,
    FormatterError,
    InvalidDayError,
    ParseError,
    RangeError,
    TimezoneError,
    ValidationError,
)

# Format functions
from calendardate.format import PatternFormatter, format_iso8601, parse_iso8601

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDate",
    "D",
    # Units
    "Month",
    "Weekday",
    # Exceptions
    "CalendarDateError",
    "ValidationError",
    "RangeError",
    "InvalidDayError",
    "ParseError",
    "TimezoneError",
    "FormatterError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
    "PatternFormatter",
]
