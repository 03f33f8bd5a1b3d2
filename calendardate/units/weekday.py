"""Weekday enumeration.

Day-of-week numbering follows Python's ``datetime.date.weekday()``:
Monday is 0 and Sunday is 6.
"""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week, Monday=0 through Sunday=6.

    Examples:
        >>> Weekday.SAT
        <Weekday.SAT: 5>
        >>> Weekday(0).is_weekend
        False
        >>> Weekday.SUN.iso_number
        7
    """

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SAT

    @property
    def iso_number(self) -> int:
        """Return the ISO 8601 weekday number (Monday=1, Sunday=7)."""
        return self.value + 1


__all__ = ["Weekday"]
