"""Month enumeration.

This module provides the Month enum so callers can write
``CalendarDate.create(2024, Month.FEB, 29)`` instead of bare numbers.
"""

from __future__ import annotations

from enum import IntEnum


class Month(IntEnum):
    """Month of the year, numbered 1 (January) through 12 (December).

    Members compare equal to their month number, so they can be passed
    anywhere a month int is accepted.

    Examples:
        >>> Month.FEB
        <Month.FEB: 2>
        >>> Month.FEB == 2
        True
        >>> Month(12).full_name
        'December'
    """

    JAN = 1
    FEB = 2
    MAR = 3
    APR = 4
    MAY = 5
    JUN = 6
    JUL = 7
    AUG = 8
    SEP = 9
    OCT = 10
    NOV = 11
    DEC = 12

    @property
    def full_name(self) -> str:
        """Return the English month name, e.g. 'January'."""
        return _FULL_NAMES[self.value - 1]


_FULL_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


__all__ = ["Month"]
