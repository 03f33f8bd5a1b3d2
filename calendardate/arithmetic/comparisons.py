"""Comparison operations for calendar dates.

This module provides explicit comparison functions for CalendarDate.
The equals, is_before and is_after methods on CalendarDate delegate here;
unlike the rich comparison operators, these raise TypeError for other types.

Dates compare by their ordinal value, which is chronological order.

Supported Operations:
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal: Test ordering
    - greater_than, greater_equal: Test ordering
    - compare: Return -1, 0, or 1 for comparison
    - min_value, max_value: Find extremes
    - clamp: Constrain value to range
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from calendardate.core.date import CalendarDate


def _ordinals(left: object, right: object) -> tuple[int, int]:
    from calendardate.core.date import CalendarDate

    if not isinstance(left, CalendarDate) or not isinstance(right, CalendarDate):
        raise TypeError(
            f"cannot compare {type(left).__name__} with {type(right).__name__}"
        )
    return left.value, right.value


def equal(left: "CalendarDate", right: "CalendarDate") -> bool:
    """Test equality between two dates.

    Raises:
        TypeError: If either argument is not a CalendarDate.

    Examples:
        >>> from calendardate import CalendarDate
        >>> equal(CalendarDate.create(2024, 1, 15), CalendarDate.create(2024, 1, 15))
        True
    """
    a, b = _ordinals(left, right)
    return a == b


def not_equal(left: "CalendarDate", right: "CalendarDate") -> bool:
    """Test inequality between two dates."""
    return not equal(left, right)


def less_than(left: "CalendarDate", right: "CalendarDate") -> bool:
    """Test if left is earlier than right.

    Raises:
        TypeError: If either argument is not a CalendarDate.

    Examples:
        >>> from calendardate import CalendarDate
        >>> less_than(CalendarDate.create(2010, 1, 1), CalendarDate.create(2010, 1, 2))
        True
    """
    a, b = _ordinals(left, right)
    return a < b


def less_equal(left: "CalendarDate", right: "CalendarDate") -> bool:
    """Test if left is earlier than or the same as right."""
    a, b = _ordinals(left, right)
    return a <= b


def greater_than(left: "CalendarDate", right: "CalendarDate") -> bool:
    """Test if left is later than right."""
    a, b = _ordinals(left, right)
    return a > b


def greater_equal(left: "CalendarDate", right: "CalendarDate") -> bool:
    """Test if left is later than or the same as right."""
    a, b = _ordinals(left, right)
    return a >= b


def compare(left: "CalendarDate", right: "CalendarDate") -> int:
    """Compare two dates, returning -1, 0, or 1.

    This is useful for sorting and other comparison-based operations.

    Returns:
        -1 if left < right
        0 if left == right
        1 if left > right

    Examples:
        >>> from calendardate import CalendarDate
        >>> compare(CalendarDate.create(2024, 1, 15), CalendarDate.create(2024, 1, 16))
        -1
    """
    a, b = _ordinals(left, right)
    return (a > b) - (a < b)


def min_value(*values: "CalendarDate") -> "CalendarDate":
    """Return the earliest of the given dates.

    Raises:
        ValueError: If no values provided.
        TypeError: If any value is not a CalendarDate.
    """
    if not values:
        raise ValueError("min_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if less_than(value, result):
            result = value
    return result


def max_value(*values: "CalendarDate") -> "CalendarDate":
    """Return the latest of the given dates.

    Raises:
        ValueError: If no values provided.
        TypeError: If any value is not a CalendarDate.
    """
    if not values:
        raise ValueError("max_value requires at least one argument")

    result = values[0]
    for value in values[1:]:
        if greater_than(value, result):
            result = value
    return result


def clamp(
    value: "CalendarDate",
    min_val: "CalendarDate",
    max_val: "CalendarDate",
) -> "CalendarDate":
    """Clamp a date to be within a range.

    Returns:
        value if min_val <= value <= max_val,
        min_val if value < min_val,
        max_val if value > max_val.

    Raises:
        TypeError: If any argument is not a CalendarDate.
        ValueError: If min_val > max_val.

    Examples:
        >>> from calendardate import CalendarDate
        >>> low = CalendarDate.create(2024, 1, 10)
        >>> high = CalendarDate.create(2024, 1, 20)
        >>> clamp(CalendarDate.create(2024, 1, 5), low, high)
        CalendarDate.create(2024, 1, 10)
    """
    if greater_than(min_val, max_val):
        raise ValueError("min_val must be less than or equal to max_val")

    if less_than(value, min_val):
        return min_val
    elif greater_than(value, max_val):
        return max_val
    else:
        return value


__all__ = [
    "equal",
    "not_equal",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "compare",
    "min_value",
    "max_value",
    "clamp",
]
