"""Core calendar types.

This module provides the fundamental value type:
    - CalendarDate: Calendar date in the proleptic Gregorian calendar
    - D: Shorthand for CalendarDate.from_string
"""

from __future__ import annotations

from calendardate.core.date import CalendarDate, D

__all__: list[str] = [
    "CalendarDate",
    "D",
]
