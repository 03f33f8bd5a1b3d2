"""strftime-style formatting.

This module provides strftime-style formatting for calendar dates. It
supports a minimal subset of format directives that avoids
locale-dependent behavior.

Supported Directives:
    %Y - 4-digit year (e.g., 2024)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %j - 3-digit day of year (001-366)
    %u - ISO weekday (1=Monday, 7=Sunday)
    %w - Weekday (0=Sunday, 6=Saturday)
    %% - Literal %

Not Supported (locale-dependent):
    %a, %A - Weekday names
    %b, %B - Month names
    %c, %x - Locale-specific formats

Examples:
    >>> from calendardate import CalendarDate
    >>> from calendardate.format import strftime

    >>> strftime(CalendarDate.create(2024, 1, 15), "%d/%m/%Y")
    '15/01/2024'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calendardate._internal.calendar import (
    value_to_day_of_week,
    value_to_day_of_year,
    value_to_ymd,
)

if TYPE_CHECKING:
    from calendardate.core.date import CalendarDate


def strftime(value: "CalendarDate", fmt: str) -> str:
    """Format a calendar date using a strftime-style format string.

    Args:
        value: The CalendarDate to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ValueError: If format contains unsupported directives.

    Examples:
        >>> from calendardate import CalendarDate
        >>> strftime(CalendarDate.create(2024, 1, 15), "%Y-%m-%d")
        '2024-01-15'
        >>> strftime(CalendarDate.create(2024, 12, 31), "day %j")
        'day 366'
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%" and i + 1 < len(fmt):
            directive = fmt[i : i + 2]
            result.append(_format_directive(value, directive))
            i += 2
        elif fmt[i] == "%":
            raise ValueError("format string ends with a lone '%'")
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def _format_directive(value: "CalendarDate", directive: str) -> str:
    """Format a single directive.

    Raises:
        ValueError: If the directive is unsupported.
    """
    if directive == "%%":
        return "%"

    year, month, day = value_to_ymd(value.value)

    if directive == "%Y":
        return f"{year:04d}"
    elif directive == "%m":
        return f"{month:02d}"
    elif directive == "%d":
        return f"{day:02d}"
    elif directive == "%j":
        return f"{value_to_day_of_year(value.value) + 1:03d}"
    elif directive == "%u":
        return str(value_to_day_of_week(value.value) + 1)
    elif directive == "%w":
        return str((value_to_day_of_week(value.value) + 1) % 7)
    else:
        raise ValueError(f"unsupported format directive: {directive}")


__all__ = ["strftime"]
