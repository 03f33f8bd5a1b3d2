"""Calendar kernel for calendardate.

This module converts between (year, month, day) triples and the single
integer ordinal a CalendarDate stores: the number of days elapsed since
January 1, year 0 (1 BCE) in the proleptic Gregorian calendar.

    ordinal 366     = 0001-01-01
    ordinal 719528  = 1970-01-01
    ordinal 3652424 = 9999-12-31

Both directions are closed form. Decoding the year needs no search and
decoding the month is a single lookup in a precomputed day-of-year table.

This module is not part of the public API.
"""

from __future__ import annotations

from calendardate._internal.constants import DAYS_BEFORE_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _fixed_days_in_month(month: int) -> int:
    # Valid for every month except February.
    return 30 if (month & 1) == (month >> 3) else 31


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2:
        return 29 if is_leap_year(year) else 28
    return _fixed_days_in_month(month)


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Day-of-year (0-based) -> month number, one byte per day.
_JAN_FEB = bytes([1]) * 31 + bytes([2]) * 28
_MAR_DEC = b"".join(bytes([m]) * _fixed_days_in_month(m) for m in range(3, 13))

NORMAL_YEAR_MONTHS: bytes = _JAN_FEB + _MAR_DEC
LEAP_YEAR_MONTHS: bytes = _JAN_FEB + bytes([2]) + _MAR_DEC


def days_before_year(year: int) -> int:
    """Return the ordinal of January 1 of the given year.

    Adds a leap day every 4 years, removes it every 100 and restores it
    every 400. Year 0 is a leap year, so January 1 of year 1 is 366.

    Examples:
        >>> days_before_year(1)
        366
        >>> days_before_year(2000)
        730485
    """
    return (
        year * 365
        + (year + 3) // 4
        - (year + 99) // 100
        + (year + 399) // 400
    )


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_value(year: int, month: int, day: int) -> int:
    """Convert year, month, day to an ordinal.

    The triple is not validated; see calendardate._internal.validation.

    Examples:
        >>> ymd_to_value(1, 1, 1)
        366
        >>> ymd_to_value(1970, 1, 1)
        719528
    """
    return days_before_year(year) + days_before_month(year, month) + day - 1


def value_to_year(value: int) -> int:
    """Return the year containing the given ordinal.

    The correction term turns the Gregorian day count into a Julian one
    (adding back the century leap days the Gregorian rule skips), after
    which dividing by 365.25 yields the year. The division is done as
    (4 * n) // 1461, which is the exact floor of n / 365.25.

    Examples:
        >>> value_to_year(366)
        1
        >>> value_to_year(730484)  # 1999-12-31
        1999
    """
    centuries = value // 36525
    return (4 * (value + centuries - centuries // 4)) // 1461


def value_to_ymd(value: int) -> tuple[int, int, int]:
    """Convert an ordinal to year, month, day.

    Examples:
        >>> value_to_ymd(366)
        (1, 1, 1)
        >>> value_to_ymd(3652424)
        (9999, 12, 31)
    """
    year = value_to_year(value)
    offset = value - days_before_year(year)
    if is_leap_year(year):
        month = LEAP_YEAR_MONTHS[offset]
    else:
        month = NORMAL_YEAR_MONTHS[offset]
    day = offset - days_before_month(year, month) + 1
    return (year, month, day)


def value_to_day_of_year(value: int) -> int:
    """Return the zero-based day of the year (0-365)."""
    return value - days_before_year(value_to_year(value))


def value_to_day_of_week(value: int) -> int:
    """Return the day of week (Monday=0, Sunday=6).

    Ordinal 0 (0000-01-01) was a Saturday.
    """
    return (value + 5) % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_year",
    "days_before_month",
    "ymd_to_value",
    "value_to_year",
    "value_to_ymd",
    "value_to_day_of_year",
    "value_to_day_of_week",
    "NORMAL_YEAR_MONTHS",
    "LEAP_YEAR_MONTHS",
]
