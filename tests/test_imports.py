"""Tests for calendardate package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_calendardate() -> None:
    """Import calendardate package succeeds."""
    import calendardate

    assert hasattr(calendardate, "__version__")
    assert calendardate.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import calendardate.core submodule succeeds."""
    from calendardate import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import calendardate.units submodule succeeds."""
    from calendardate import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import calendardate.format submodule succeeds."""
    from calendardate import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import calendardate.convert submodule succeeds."""
    from calendardate import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import calendardate.arithmetic submodule succeeds."""
    from calendardate import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import calendardate._internal submodule succeeds."""
    from calendardate import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import calendardate.errors succeeds with all exception classes."""
    from calendardate.errors import (
        CalendarDateError,
        FormatterError,
        InvalidDayError,
        ParseError,
        RangeError,
        TimezoneError,
        ValidationError,
    )

    # Verify inheritance hierarchy
    assert issubclass(ValidationError, CalendarDateError)
    assert issubclass(RangeError, ValidationError)
    assert issubclass(InvalidDayError, ValidationError)
    assert issubclass(ParseError, CalendarDateError)
    assert issubclass(TimezoneError, CalendarDateError)
    assert issubclass(FormatterError, CalendarDateError)
    assert issubclass(CalendarDateError, Exception)


def test_import_constants() -> None:
    """Import calendardate._internal.constants succeeds."""
    from calendardate._internal.constants import (
        DAYS_BEFORE_MONTH,
        MAX_VALUE,
        MAX_YEAR,
        MIN_VALUE,
        MIN_YEAR,
        UNIX_EPOCH_VALUE,
    )

    assert MIN_VALUE == 366
    assert MAX_VALUE == 3_652_424
    assert MIN_YEAR == 1
    assert MAX_YEAR == 9999
    assert UNIX_EPOCH_VALUE == 719_528
    assert len(DAYS_BEFORE_MONTH) == 13  # 0-indexed placeholder + 12 months
