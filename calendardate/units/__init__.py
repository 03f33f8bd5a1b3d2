"""Calendar units and enumerations.

This module provides:
    - Month: Month of the year (JAN=1 .. DEC=12)
    - Weekday: Day of the week (MON=0 .. SUN=6)
"""

from __future__ import annotations

from calendardate.units.month import Month
from calendardate.units.weekday import Weekday

__all__: list[str] = [
    "Month",
    "Weekday",
]
