"""Internal utilities for calendardate.

This module contains private implementation details:
    - The ordinal encoding/decoding kernel and month lookup tables
    - Constants and magic numbers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calendardate._internal.calendar import (
    days_in_month,
    is_leap_year,
    value_to_ymd,
    ymd_to_value,
)
from calendardate._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_value,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "is_leap_year",
    "value_to_ymd",
    "ymd_to_value",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_value",
    "validate_year",
]
