"""Standalone arithmetic operations for calendar dates.

This module provides explicit functions for calendar arithmetic that serve
as the canonical implementation. The methods on CalendarDate delegate to
these functions.

Supported operations:
    - add_days: Shift by a number of days
    - add_months: Shift by calendar months, clamping to the end of month
    - add_years: Shift by calendar years, Feb 29 rolling to Mar 1
    - days_between: Signed number of days between two dates
    - full_years_between: Whole years elapsed (age computation)

Every operation returns a new CalendarDate and raises RangeError if the
result would leave 0001-01-01 .. 9999-12-31.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calendardate._internal.calendar import days_in_month, is_leap_year, value_to_ymd
from calendardate._internal.constants import MONTHS_PER_YEAR
from calendardate._internal.validation import validate_year

if TYPE_CHECKING:
    from calendardate.core.date import CalendarDate


def _check_date(name: str, value: object) -> "CalendarDate":
    from calendardate.core.date import CalendarDate

    if not isinstance(value, CalendarDate):
        raise TypeError(f"{name} must be a CalendarDate, got {type(value).__name__}")
    return value


def _check_delta(name: str, delta: object) -> int:
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise TypeError(f"{name} must be an int, got {type(delta).__name__}")
    return delta


def add_days(date: "CalendarDate", days: int) -> "CalendarDate":
    """Return a new date offset by the given number of days.

    Args:
        date: The starting date.
        days: Number of days to add (can be negative).

    Returns:
        A new CalendarDate.

    Raises:
        TypeError: If date is not a CalendarDate or days is not an int.
        RangeError: If the result is out of range.

    Examples:
        >>> from calendardate import CalendarDate
        >>> add_days(CalendarDate.from_string("2020-12-31"), 1)
        CalendarDate.create(2021, 1, 1)
    """
    date = _check_date("date", date)
    return type(date)(date.value + _check_delta("days", days))


def add_months(date: "CalendarDate", months: int) -> "CalendarDate":
    """Return a new date offset by the given number of months.

    If the day does not exist in the target month it is clamped to the
    last day of that month, so the month field always moves by exactly
    ``months``.

    Args:
        date: The starting date.
        months: Number of months to add (can be negative).

    Returns:
        A new CalendarDate.

    Raises:
        TypeError: If date is not a CalendarDate or months is not an int.
        RangeError: If the result is out of range.

    Examples:
        >>> from calendardate import CalendarDate
        >>> add_months(CalendarDate.from_string("2000-12-31"), 2)
        CalendarDate.create(2001, 2, 28)
        >>> add_months(CalendarDate.from_string("2000-12-31"), 4)
        CalendarDate.create(2001, 4, 30)
    """
    date = _check_date("date", date)
    year, month, day = value_to_ymd(date.value)

    # Floor semantics: index -1 is December of the previous year
    total_months = year * MONTHS_PER_YEAR + (month - 1) + _check_delta("months", months)
    new_year, month_index = divmod(total_months, MONTHS_PER_YEAR)
    new_month = month_index + 1
    validate_year(new_year)

    new_day = min(day, days_in_month(new_year, new_month))
    return type(date).create(new_year, new_month, new_day)


def add_years(date: "CalendarDate", years: int) -> "CalendarDate":
    """Return a new date offset by the given number of years.

    February 29 moved into a non-leap year becomes March 1 of that year.
    Note this differs from add_months, which clamps to February 28.

    Args:
        date: The starting date.
        years: Number of years to add (can be negative).

    Returns:
        A new CalendarDate.

    Raises:
        TypeError: If date is not a CalendarDate or years is not an int.
        RangeError: If the result is out of range.

    Examples:
        >>> from calendardate import CalendarDate
        >>> add_years(CalendarDate.from_string("2000-02-29"), 1)
        CalendarDate.create(2001, 3, 1)
        >>> add_years(CalendarDate.from_string("2000-02-29"), 4)
        CalendarDate.create(2004, 2, 29)
    """
    date = _check_date("date", date)
    year, month, day = value_to_ymd(date.value)
    new_year = year + _check_delta("years", years)
    validate_year(new_year)

    if month == 2 and day == 29 and not is_leap_year(new_year):
        return type(date).create(new_year, 3, 1)
    return type(date).create(new_year, month, day)


def days_between(start: "CalendarDate", end: "CalendarDate") -> int:
    """Return the number of days from start to end.

    Positive if end is after start.

    Raises:
        TypeError: If either argument is not a CalendarDate.

    Examples:
        >>> from calendardate import CalendarDate
        >>> days_between(CalendarDate.from_string("2024-02-28"),
        ...              CalendarDate.from_string("2024-03-01"))
        2
    """
    return _check_date("end", end).value - _check_date("start", start).value


def full_years_between(earlier: "CalendarDate", later: "CalendarDate") -> int:
    """Return how many full years have passed from earlier to later.

    The anniversary day itself counts as a completed year. For a
    February 29 start date the anniversary in a non-leap year is
    reached on March 1.

    Raises:
        TypeError: If either argument is not a CalendarDate.

    Examples:
        >>> from calendardate import CalendarDate
        >>> birth = CalendarDate.from_string("1990-08-10")
        >>> full_years_between(birth, CalendarDate.from_string("2020-08-09"))
        29
        >>> full_years_between(birth, CalendarDate.from_string("2020-08-10"))
        30
    """
    _check_date("earlier", earlier)
    _check_date("later", later)
    earlier_year, earlier_month, earlier_day = value_to_ymd(earlier.value)
    later_year, later_month, later_day = value_to_ymd(later.value)

    reached_anniversary = later_month > earlier_month or (
        later_month == earlier_month and later_day >= earlier_day
    )
    years = later_year - earlier_year
    return years if reached_anniversary else years - 1


__all__ = [
    "add_days",
    "add_months",
    "add_years",
    "days_between",
    "full_years_between",
]
