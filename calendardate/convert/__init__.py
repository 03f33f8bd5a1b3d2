"""Calendar date conversion utilities.

This module provides functions for converting calendar dates to and from
other representations:
    - JSON serialization and deserialization
    - Unix epoch conversions (seconds, milliseconds)

Examples:
    >>> from calendardate import CalendarDate
    >>> from calendardate.convert import to_json, from_json

    >>> d = CalendarDate.create(2024, 1, 15)
    >>> from_json(to_json(d)) == d
    True

    >>> from calendardate.convert import to_epoch_seconds, from_epoch_seconds
    >>> from_epoch_seconds(to_epoch_seconds(d)) == d
    True
"""

from __future__ import annotations

from calendardate.convert.json import CalendarDateJSONEncoder, from_json, to_json
from calendardate.convert.epoch import (
    from_epoch_ms,
    from_epoch_seconds,
    to_epoch_ms,
    to_epoch_seconds,
)

__all__ = [
    # JSON
    "to_json",
    "from_json",
    "CalendarDateJSONEncoder",
    # Epoch
    "to_epoch_seconds",
    "from_epoch_seconds",
    "to_epoch_ms",
    "from_epoch_ms",
]
