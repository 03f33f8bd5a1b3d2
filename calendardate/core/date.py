"""CalendarDate class representing a calendar date.

This module provides the CalendarDate class for representing calendar
dates in the proleptic Gregorian calendar, from 0001-01-01 through
9999-12-31, with no time-of-day or time zone component.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from calendardate._internal.calendar import (
    days_in_month,
    is_leap_year,
    value_to_day_of_week,
    value_to_day_of_year,
    value_to_year,
    value_to_ymd,
    ymd_to_value,
)
from calendardate._internal.constants import (
    MILLIS_PER_DAY,
    SECONDS_PER_DAY,
    UNIX_EPOCH_VALUE,
)
from calendardate._internal.validation import (
    validate_date,
    validate_month,
    validate_value,
)
from calendardate.arithmetic import comparisons, ops
from calendardate.errors import TimezoneError
from calendardate.format.formatter import require_utc_formatter
from calendardate.format.iso8601 import format_iso8601, parse_iso8601
from calendardate.units.weekday import Weekday

if TYPE_CHECKING:
    from calendardate.format.formatter import DateFormatter

_EPOCH_DAY = datetime.date(1970, 1, 1)
_EPOCH_MIDNIGHT = datetime.datetime.combine(_EPOCH_DAY, datetime.time(0, 0))
_ONE_DAY = datetime.timedelta(days=1)


class CalendarDate:
    """A calendar date in the proleptic Gregorian calendar.

    CalendarDate represents a day, not an instant: it has no time of day
    and no time zone, so it cannot drift by a day when moved between
    zones. The Gregorian rules are extended to dates before the
    calendar's 1582 adoption.

    Internally a date is a single integer, its ordinal: the number of
    days since January 1, year 0 (1 BCE). Ordinal 366 is 0001-01-01 and
    ordinal 3652424 is 9999-12-31. Every accessor is computed from the
    ordinal and every operation returns a new instance.

    Attributes:
        value: The ordinal (days since 0000-01-01).
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = CalendarDate.create(2024, 1, 15)
        >>> d.value
        739265
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> CalendarDate(366)
        CalendarDate.create(1, 1, 1)

        >>> str(CalendarDate.from_string("20240229"))
        '2024-02-29'
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        """Create a CalendarDate from its ordinal.

        Args:
            value: Days since January 1, year 0 (1 BCE).

        Raises:
            RangeError: If value is not an int or is outside 366-3652424.

        Examples:
            >>> CalendarDate(730485)
            CalendarDate.create(2000, 1, 1)

            >>> CalendarDate(365)
            Traceback (most recent call last):
            ...
            calendardate.errors.RangeError: date value (365) out of range
        """
        object.__setattr__(self, "_value", validate_value(value))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def create(cls, year: int, month: int, day: int) -> CalendarDate:
        """Create a CalendarDate from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            TypeError: If a component is not an int.
            RangeError: If year is outside 1-9999.
            ValidationError: If month is outside 1-12.
            InvalidDayError: If the day does not exist in that month.

        Examples:
            >>> CalendarDate.create(2024, 2, 29)
            CalendarDate.create(2024, 2, 29)

            >>> CalendarDate.create(2023, 2, 29)
            Traceback (most recent call last):
            ...
            calendardate.errors.InvalidDayError: day must be between 1 and 28 for 2023-02, got 29
        """
        validate_date(year, month, day)
        return cls(ymd_to_value(year, month, day))

    @classmethod
    def from_string(cls, s: str) -> CalendarDate:
        """Parse a date from "YYYY-MM-DD" or "YYYYMMDD".

        Raises:
            ParseError: If the string is malformed or names an invalid date.

        Examples:
            >>> CalendarDate.from_string("1643-01-04")
            CalendarDate.create(1643, 1, 4)
            >>> CalendarDate.from_string("16430104")
            CalendarDate.create(1643, 1, 4)
        """
        return parse_iso8601(s)

    @classmethod
    def from_date(cls, dt: datetime.datetime) -> CalendarDate:
        """Create a CalendarDate from an aware datetime at midnight UTC.

        The datetime may carry any tzinfo as long as the instant it names
        is exactly 00:00:00.000000 UTC. Anything else is rejected, never
        truncated.

        Args:
            dt: An aware datetime.

        Raises:
            TypeError: If dt is not a datetime.datetime.
            TimezoneError: If dt is naive or not at midnight UTC.
            RangeError: If the UTC day falls outside 0001-01-01 .. 9999-12-31.

        Examples:
            >>> import datetime
            >>> CalendarDate.from_date(
            ...     datetime.datetime(2024, 1, 15, tzinfo=datetime.timezone.utc))
            CalendarDate.create(2024, 1, 15)
        """
        if not isinstance(dt, datetime.datetime):
            raise TypeError(f"expected datetime.datetime, got {type(dt).__name__}")
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise TimezoneError(
                f"naive datetime {dt.isoformat()}; use UTC for calendar dates"
            )

        # astimezone() overflows when the UTC day is outside years 1-9999
        wall_clock = datetime.datetime.combine(_EPOCH_DAY, dt.time())
        since_utc_midnight = wall_clock - _EPOCH_MIDNIGHT - dt.utcoffset()
        day_shift, remainder = divmod(since_utc_midnight, _ONE_DAY)
        if remainder:
            raise TimezoneError(
                f"non-UTC datetime {dt.isoformat()}; use UTC midnight for calendar dates"
            )
        return cls(ymd_to_value(dt.year, dt.month, dt.day) + day_shift)

    @classmethod
    def from_py_date(cls, d: datetime.date) -> CalendarDate:
        """Create a CalendarDate from a plain datetime.date.

        Raises:
            TypeError: If d is not a datetime.date, or is a datetime.datetime.

        Examples:
            >>> import datetime
            >>> CalendarDate.from_py_date(datetime.date(1867, 7, 1))
            CalendarDate.create(1867, 7, 1)
        """
        if isinstance(d, datetime.datetime) or not isinstance(d, datetime.date):
            raise TypeError(f"expected datetime.date, got {type(d).__name__}")
        return cls.create(d.year, d.month, d.day)

    @classmethod
    def from_epoch_ms(cls, ms: int) -> CalendarDate:
        """Create a CalendarDate from Unix milliseconds at midnight UTC.

        Raises:
            TimezoneError: If ms is not a whole number of days.
            RangeError: If the day is out of range.
        """
        from calendardate.convert.epoch import from_epoch_ms

        return from_epoch_ms(ms)

    @classmethod
    def from_epoch_seconds(cls, seconds: int) -> CalendarDate:
        """Create a CalendarDate from Unix seconds at midnight UTC.

        Raises:
            TimezoneError: If seconds is not a whole number of days.
            RangeError: If the day is out of range.
        """
        from calendardate.convert.epoch import from_epoch_seconds

        return from_epoch_seconds(seconds)

    @classmethod
    def today(cls) -> CalendarDate:
        """Return today's date according to the system's local time.

        Examples:
            >>> d = CalendarDate.today()
            >>> d.year >= 2024
            True
        """
        now = datetime.date.today()
        return cls.create(now.year, now.month, now.day)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True if year is a leap year.

        Examples:
            >>> CalendarDate.is_leap_year(2000)
            True
            >>> CalendarDate.is_leap_year(2100)
            False
        """
        return is_leap_year(year)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Return the number of days in the given month of the given year.

        Raises:
            ValidationError: If month is outside 1-12.

        Examples:
            >>> CalendarDate.days_in_month(2020, 2)
            29
            >>> CalendarDate.days_in_month(2023, 9)
            30
        """
        validate_month(month)
        return days_in_month(year, month)

    @property
    def value(self) -> int:
        """Return the ordinal (days since January 1, year 0)."""
        return self._value

    @property
    def year(self) -> int:
        """Return the year component (1-9999)."""
        return value_to_year(self._value)

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = value_to_ymd(self._value)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = value_to_ymd(self._value)
        return day

    @property
    def day_of_week(self) -> Weekday:
        """Return the day of the week.

        Returns Monday as 0 through Sunday as 6, matching Python's
        datetime.date.weekday() convention.

        Examples:
            >>> CalendarDate.create(2000, 1, 1).day_of_week
            <Weekday.SAT: 5>
            >>> CalendarDate.create(1, 1, 1).day_of_week == 0
            True
        """
        return Weekday(value_to_day_of_week(self._value))

    @property
    def day_of_year(self) -> int:
        """Return the zero-based day of the year.

        Examples:
            >>> CalendarDate.create(2024, 1, 1).day_of_year
            0
            >>> CalendarDate.create(2024, 12, 31).day_of_year  # Leap year
            365
        """
        return value_to_day_of_year(self._value)

    def add_days(self, days: int) -> CalendarDate:
        """Return a new date offset by the given number of days.

        Raises:
            RangeError: If the result is out of range.

        Examples:
            >>> CalendarDate.create(2020, 12, 31).add_days(365 * 4)
            CalendarDate.create(2024, 12, 30)
        """
        return ops.add_days(self, days)

    def add_months(self, months: int) -> CalendarDate:
        """Return a new date offset by the given number of months.

        The day is clamped to the last day of the target month.

        Raises:
            RangeError: If the result is out of range.

        Examples:
            >>> CalendarDate.create(2000, 12, 31).add_months(2)
            CalendarDate.create(2001, 2, 28)
        """
        return ops.add_months(self, months)

    def add_years(self, years: int) -> CalendarDate:
        """Return a new date offset by the given number of years.

        February 29 moved into a non-leap year becomes March 1.

        Raises:
            RangeError: If the result is out of range.

        Examples:
            >>> CalendarDate.create(2000, 2, 29).add_years(1)
            CalendarDate.create(2001, 3, 1)
        """
        return ops.add_years(self, years)

    def full_years_since(self, earlier: CalendarDate) -> int:
        """Return the number of full years from earlier to this date.

        Useful for computing an age; the birthday itself counts.

        Examples:
            >>> birth = CalendarDate.create(1990, 8, 10)
            >>> CalendarDate.create(2020, 8, 9).full_years_since(birth)
            29
            >>> CalendarDate.create(2020, 8, 10).full_years_since(birth)
            30
        """
        return ops.full_years_between(earlier, self)

    def days_since(self, other: CalendarDate) -> int:
        """Return the number of days from other to this date."""
        return ops.days_between(other, self)

    def equals(self, other: CalendarDate) -> bool:
        """Return True if other is the same day."""
        return comparisons.equal(self, other)

    def is_before(self, other: CalendarDate) -> bool:
        """Return True if this date is earlier than other."""
        return comparisons.less_than(self, other)

    def is_after(self, other: CalendarDate) -> bool:
        """Return True if this date is later than other."""
        return comparisons.greater_than(self, other)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> CalendarDate.create(123, 4, 5).to_iso_format()
            '0123-04-05'
        """
        return format_iso8601(self)

    def to_date(self) -> datetime.datetime:
        """Return midnight UTC of this day as an aware datetime.

        Examples:
            >>> CalendarDate.create(2024, 1, 15).to_date().isoformat()
            '2024-01-15T00:00:00+00:00'
        """
        year, month, day = value_to_ymd(self._value)
        return datetime.datetime(year, month, day, tzinfo=datetime.timezone.utc)

    def to_py_date(self) -> datetime.date:
        """Return this day as a plain datetime.date."""
        year, month, day = value_to_ymd(self._value)
        return datetime.date(year, month, day)

    def to_epoch_ms(self) -> int:
        """Return milliseconds since the Unix epoch at midnight UTC.

        Examples:
            >>> CalendarDate.create(1970, 1, 2).to_epoch_ms()
            86400000
        """
        return (self._value - UNIX_EPOCH_VALUE) * MILLIS_PER_DAY

    def to_epoch_seconds(self) -> int:
        """Return seconds since the Unix epoch at midnight UTC.

        Examples:
            >>> CalendarDate.create(1969, 12, 31).to_epoch_seconds()
            -86400
        """
        return (self._value - UNIX_EPOCH_VALUE) * SECONDS_PER_DAY

    def format(self, formatter: DateFormatter) -> str:
        """Render this date with an external formatter.

        The formatter receives midnight UTC of this day, so it must be
        configured for the UTC time zone.

        Args:
            formatter: Any object with a ``time_zone`` attribute and a
                ``format(instant)`` method.

        Raises:
            FormatterError: If the formatter's time zone is not UTC.

        Examples:
            >>> from calendardate.format import PatternFormatter
            >>> CalendarDate.create(1969, 7, 20).format(PatternFormatter("%Y/%m/%d"))
            '1969/07/20'
        """
        require_utc_formatter(formatter)
        return formatter.format(self.to_date())

    def to_json(self) -> dict:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> CalendarDate(5000 + 730485).to_json()
            {'_type': 'CalendarDate', 'value': '2013-09-09'}
        """
        from calendardate.convert.json import to_json

        return to_json(self)

    @classmethod
    def from_json(cls, data: dict) -> CalendarDate:
        """Create a CalendarDate from a JSON dictionary.

        Raises:
            ParseError: If the data is invalid.
        """
        from calendardate.convert.json import from_json

        return from_json(data)

    def __sub__(self, other: object) -> int:
        """Return the number of days between two dates.

        Examples:
            >>> CalendarDate.create(2024, 3, 1) - CalendarDate.create(2024, 2, 28)
            2
        """
        if not isinstance(other, CalendarDate):
            return NotImplemented  # type: ignore[return-value]
        return ops.days_between(other, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __reduce__(self) -> tuple:
        return (type(self), (self._value,))

    def __repr__(self) -> str:
        """Return a string like 'CalendarDate.create(2024, 1, 15)'."""
        year, month, day = value_to_ymd(self._value)
        return f"CalendarDate.create({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


def D(s: str) -> CalendarDate:
    """Shorthand for CalendarDate.from_string.

    Examples:
        >>> D("2023-08-15").add_days(1)
        CalendarDate.create(2023, 8, 16)
    """
    return CalendarDate.from_string(s)


__all__ = ["CalendarDate", "D"]
