"""Tests for ISO 8601 date parsing and formatting."""

from __future__ import annotations

import pytest

from calendardate import CalendarDate
from calendardate.errors import (
    CalendarDateError,
    InvalidDayError,
    ParseError,
    RangeError,
)
from calendardate.format import format_iso8601, parse_iso8601

DATE_STRINGS = [
    "2000-01-01",
    "2000-12-31",
    "2007-01-09",
    "2010-10-10",
    "2016-02-29",
    "2222-10-01",
    "1583-01-01",
    "1643-01-04",
    "1794-08-15",
    "1867-07-01",
    "0123-04-05",
    "5555-06-07",
    "9999-12-31",
]


class TestParseValid:
    """Tests for well-formed date strings."""

    @pytest.mark.parametrize("s", DATE_STRINGS)
    def test_extended_form(self, s: str) -> None:
        assert str(CalendarDate.from_string(s)) == s

    @pytest.mark.parametrize("s", DATE_STRINGS)
    def test_basic_form(self, s: str) -> None:
        assert str(CalendarDate.from_string(s.replace("-", ""))) == s

    def test_components(self) -> None:
        d = parse_iso8601("1867-07-01")
        assert (d.year, d.month, d.day) == (1867, 7, 1)

    def test_minimum(self) -> None:
        assert parse_iso8601("0001-01-01").value == 366


class TestParseInvalid:
    """Tests for strings that must be rejected."""

    @pytest.mark.parametrize(
        "bad",
        [
            "hello",
            "2016,01,01",
            "05/05/05",
            "2016-o1-o1",
            "",
            "2016-1-1",
            "2016-01-01 ",
            " 2016-01-01",
            "2016-01-01T00:00",
            "2016/01/01",
            "201601010",
            "+2016-01-01",
            "2016-01-0\n",
            "２０１６-01-01",
        ],
    )
    def test_bad_shape(self, bad: str) -> None:
        with pytest.raises(
            ParseError, match="date string not in YYYY-MM-DD or YYYYMMDD format"
        ):
            CalendarDate.from_string(bad)

    @pytest.mark.parametrize(
        "bad",
        ["2016-13-01", "2016-00-10", "2015-02-29", "2016-04-31", "2016-01-00"],
    )
    def test_invalid_fields(self, bad: str) -> None:
        with pytest.raises(ParseError, match="invalid date"):
            CalendarDate.from_string(bad)

    def test_year_zero(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            CalendarDate.from_string("0000-12-31")
        assert isinstance(exc_info.value.__cause__, RangeError)

    def test_invalid_day_is_chained(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            CalendarDate.from_string("20150229")
        assert isinstance(exc_info.value.__cause__, InvalidDayError)

    def test_non_string(self) -> None:
        with pytest.raises(ParseError, match="expected str"):
            parse_iso8601(20160101)  # type: ignore[arg-type]

    def test_parse_error_is_library_error(self) -> None:
        with pytest.raises(CalendarDateError):
            CalendarDate.from_string("hello")


class TestFormatIso:
    """Tests for format_iso8601()."""

    def test_zero_padding(self) -> None:
        assert format_iso8601(CalendarDate.create(1, 2, 3)) == "0001-02-03"
        assert format_iso8601(CalendarDate.create(853, 6, 12)) == "0853-06-12"

    def test_non_date(self) -> None:
        with pytest.raises(TypeError):
            format_iso8601("2016-01-01")  # type: ignore[arg-type]

    @pytest.mark.parametrize("s", DATE_STRINGS)
    def test_round_trip(self, s: str) -> None:
        assert format_iso8601(parse_iso8601(s)) == s
