"""Delegated, formatter-based rendering of calendar dates.

CalendarDate.format() hands the date to an external formatter as the
instant of midnight UTC on that day. The formatter must therefore render
in UTC; in any other zone the instant falls on a different local day for
half the planet. This module defines the formatter protocol and the UTC
precondition, plus PatternFormatter, a small non-locale implementation.

Classes:
    DateFormatter: Protocol every formatter satisfies.
    PatternFormatter: strftime-pattern formatter bound to a time zone.

Functions:
    is_utc_zone: Return True for UTC and the IANA names linked to it.
    require_utc_formatter: Raise FormatterError unless time_zone is UTC.
"""

from __future__ import annotations

import datetime
from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo

from calendardate.errors import FormatterError, TimezoneError

UTC_ZONE_NAME = "UTC"

# IANA names that are links to UTC
UTC_ZONE_NAMES = frozenset(
    {
        "UTC",
        "Etc/UTC",
        "UCT",
        "Etc/UCT",
        "Universal",
        "Etc/Universal",
        "Zulu",
        "Etc/Zulu",
    }
)


@runtime_checkable
class DateFormatter(Protocol):
    """A locale-aware formatter capability.

    Implementations expose the IANA name of the time zone they render in
    and turn an aware datetime into display text.
    """

    time_zone: str

    def format(self, instant: datetime.datetime) -> str: ...


def is_utc_zone(time_zone: object) -> bool:
    """Return True if time_zone names or is the UTC zone.

    Accepts an IANA name linked to UTC (see UTC_ZONE_NAMES), a ZoneInfo
    with such a key, or datetime.timezone.utc. Other zones are rejected
    even when their offset is zero, e.g. "Etc/GMT" or "Europe/London".

    Examples:
        >>> is_utc_zone("Etc/UTC")
        True
        >>> is_utc_zone("America/Vancouver")
        False
    """
    if isinstance(time_zone, str):
        return time_zone in UTC_ZONE_NAMES
    if isinstance(time_zone, ZoneInfo):
        return time_zone.key in UTC_ZONE_NAMES
    return time_zone is datetime.timezone.utc


def require_utc_formatter(formatter: object) -> None:
    """Check that a formatter renders in UTC.

    Args:
        formatter: The formatter to check.

    Raises:
        FormatterError: If the formatter's time_zone is not UTC.
    """
    time_zone = getattr(formatter, "time_zone", None)
    if not is_utc_zone(time_zone):
        raise FormatterError(
            f"formatter must use UTC time zone, got {time_zone!r}"
        )


class PatternFormatter:
    """Format instants with a strftime-style pattern in a fixed time zone.

    The instant is first converted to ``time_zone`` and its calendar day
    is rendered with calendardate.format.strftime directives.

    Examples:
        >>> from calendardate import CalendarDate
        >>> fmt = PatternFormatter("%d.%m.%Y")
        >>> CalendarDate.create(2023, 8, 1).format(fmt)
        '01.08.2023'
    """

    __slots__ = ("_pattern", "_time_zone")

    def __init__(self, pattern: str, time_zone: str = UTC_ZONE_NAME) -> None:
        self._pattern = pattern
        self._time_zone = time_zone

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def time_zone(self) -> str:
        return self._time_zone

    def format(self, instant: datetime.datetime) -> str:
        """Render the calendar day of an aware instant.

        Raises:
            TimezoneError: If instant is naive.
        """
        from calendardate.core.date import CalendarDate
        from calendardate.format.strftime import strftime

        if instant.tzinfo is None or instant.utcoffset() is None:
            raise TimezoneError("cannot format a naive datetime")

        if self._time_zone in UTC_ZONE_NAMES:
            tz: datetime.tzinfo = datetime.timezone.utc
        else:
            tz = ZoneInfo(self._time_zone)
        local = instant.astimezone(tz)
        return strftime(CalendarDate.create(local.year, local.month, local.day), self._pattern)

    def __repr__(self) -> str:
        return f"PatternFormatter({self._pattern!r}, time_zone={self._time_zone!r})"


__all__ = [
    "DateFormatter",
    "PatternFormatter",
    "is_utc_zone",
    "require_utc_formatter",
    "UTC_ZONE_NAME",
    "UTC_ZONE_NAMES",
]
