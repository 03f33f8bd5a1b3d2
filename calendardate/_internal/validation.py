"""Validation utilities for calendardate.

This module checks ordinals and (year, month, day) triples eagerly, so
that once a CalendarDate exists none of its accessors can fail.

This module is not part of the public API.
"""

from __future__ import annotations

from calendardate._internal.calendar import days_in_month
from calendardate._internal.constants import MAX_VALUE, MAX_YEAR, MIN_VALUE, MIN_YEAR
from calendardate.errors import InvalidDayError, RangeError, ValidationError


def validate_value(value: object) -> int:
    """Validate that an ordinal is an integer within the supported range.

    Args:
        value: The candidate ordinal.

    Returns:
        The ordinal, unchanged.

    Raises:
        RangeError: If value is not an int, or is outside 366-3652424.

    Examples:
        >>> validate_value(366)
        366
        >>> validate_value(365)
        Traceback (most recent call last):
        ...
        calendardate.errors.RangeError: date value (365) out of range
    """
    # bool is an int subclass but never a meaningful ordinal
    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError(f"non-integer date value: {value!r}")
    if value < MIN_VALUE or value > MAX_VALUE:
        raise RangeError(f"date value ({value}) out of range")
    return value


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        RangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise RangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        InvalidDayError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDayError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that year, month, day form a supported date.

    Raises:
        TypeError: If a component is not an int.
        RangeError: If the year is out of range.
        ValidationError: If the month is invalid.
        InvalidDayError: If the day is invalid.
    """
    for name, component in (("year", year), ("month", month), ("day", day)):
        if isinstance(component, bool) or not isinstance(component, int):
            raise TypeError(
                f"{name} must be an int, got {type(component).__name__}"
            )
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


__all__ = [
    "validate_value",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
]
