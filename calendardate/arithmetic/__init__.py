"""Calendar arithmetic operations.

The functions in this module serve as the canonical implementations
for date arithmetic. They provide explicit function-based APIs that
complement the methods and operators on CalendarDate.

Arithmetic Operations (from calendardate.arithmetic.ops):
    - add_days: Shift by whole days
    - add_months: Shift by months, clamping the day to the end of month
    - add_years: Shift by years, Feb 29 rolling to Mar 1
    - days_between: Signed day difference
    - full_years_between: Whole years elapsed (age)

Comparison Operations (from calendardate.arithmetic.comparisons):
    - equal, not_equal: Test equality/inequality
    - less_than, less_equal: Test ordering
    - greater_than, greater_equal: Test ordering
    - compare: Return -1, 0, or 1 for comparison
    - min_value, max_value: Find extremes
    - clamp: Constrain value to range
"""

from __future__ import annotations

from calendardate.arithmetic.ops import (
    add_days,
    add_months,
    add_years,
    days_between,
    full_years_between,
)
from calendardate.arithmetic.comparisons import (
    equal,
    not_equal,
    less_than,
    less_equal,
    greater_than,
    greater_equal,
    compare,
    min_value,
    max_value,
    clamp,
)

__all__ = [
    # Arithmetic operations
    "add_days",
    "add_months",
    "add_years",
    "days_between",
    "full_years_between",
    # Comparison operations
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
