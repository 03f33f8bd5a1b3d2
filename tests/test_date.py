"""Tests for the CalendarDate class."""

from __future__ import annotations

import copy
import datetime
import pickle

import pytest

from calendardate import CalendarDate, D, Month, Weekday
from calendardate.errors import (
    InvalidDayError,
    ParseError,
    RangeError,
    ValidationError,
)

Y2K = 730_485  # 2000-01-01

# (year, month, day), iso string, ordinal, day of week, day of year
SPECIFIC_DATES = [
    ((2000, Month.JAN, 1), "2000-01-01", 0 + Y2K, Weekday.SAT, 0),
    ((2000, Month.JAN, 31), "2000-01-31", 30 + Y2K, Weekday.MON, 30),
    ((2000, Month.FEB, 1), "2000-02-01", 31 + Y2K, Weekday.TUE, 31),
    ((2025, Month.NOV, 30), "2025-11-30", 9465 + Y2K, Weekday.SUN, 365 - 32),
    ((2025, Month.DEC, 1), "2025-12-01", 9466 + Y2K, Weekday.MON, 365 - 31),
    ((2789, Month.FEB, 28), "2789-02-28", 288235 + Y2K, Weekday.TUE, 58),
    ((2789, Month.MAR, 1), "2789-03-01", 288236 + Y2K, Weekday.WED, 59),
    ((9876, Month.MAY, 4), "9876-05-04", 3607259, Weekday.THU, 124),
    ((1999, Month.DEC, 31), "1999-12-31", -1 + Y2K, Weekday.FRI, 364),
    ((1997, Month.JAN, 1), "1997-01-01", -1095 + Y2K, Weekday.WED, 0),
    ((1996, Month.DEC, 31), "1996-12-31", -1096 + Y2K, Weekday.TUE, 365),
    ((1996, Month.JAN, 1), "1996-01-01", -1461 + Y2K, Weekday.MON, 0),
    ((1794, Month.AUG, 15), "1794-08-15", -75013 + Y2K, Weekday.FRI, 226),
    ((1583, Month.JAN, 1), "1583-01-01", -152306 + Y2K, Weekday.SAT, 0),
    ((400, Month.MAR, 1), "0400-03-01", 146157, Weekday.WED, 60),
    ((123, Month.APR, 5), "0123-04-05", 45019, Weekday.MON, 94),
    ((1, Month.JAN, 1), "0001-01-01", 366, Weekday.MON, 0),
]


class Birthday(CalendarDate):
    """A CalendarDate subclass used to check that the type is preserved."""

    __slots__ = ()


def assert_sane(d: CalendarDate) -> None:
    """Check a date is in range and can be rebuilt from its parts."""
    assert 1 <= d.year <= 9999
    assert 1 <= d.month <= 12
    assert 1 <= d.day <= 31
    assert CalendarDate(d.value).value == d.value
    assert CalendarDate.create(d.year, d.month, d.day).value == d.value


class TestCalendarDateConstruction:
    """Tests for CalendarDate construction and validation."""

    @pytest.mark.parametrize(
        "args,iso,value,day_of_week,day_of_year",
        SPECIFIC_DATES,
        ids=[row[1] for row in SPECIFIC_DATES],
    )
    def test_specific_dates(self, args, iso, value, day_of_week, day_of_year) -> None:
        """Construct from a triple and check every derived property."""
        d = CalendarDate.create(*args)
        assert_sane(d)
        assert d.value == value
        assert str(d) == iso
        assert d.day_of_week == day_of_week
        assert d.day_of_year == day_of_year

    def test_construct_from_value(self) -> None:
        d = CalendarDate(Y2K)
        assert (d.year, d.month, d.day) == (2000, 1, 1)

    def test_value_limits(self) -> None:
        assert str(CalendarDate(366)) == "0001-01-01"
        assert str(CalendarDate(3_652_424)) == "9999-12-31"

    def test_value_below_range(self) -> None:
        with pytest.raises(RangeError, match="out of range"):
            CalendarDate(365)

    def test_value_above_range(self) -> None:
        with pytest.raises(RangeError, match="out of range"):
            CalendarDate(3_652_425)

    def test_non_integer_value(self) -> None:
        with pytest.raises(RangeError, match="non-integer"):
            CalendarDate(730485.5)  # type: ignore[arg-type]
        with pytest.raises(RangeError, match="non-integer"):
            CalendarDate(730485.0)  # type: ignore[arg-type]
        with pytest.raises(RangeError, match="non-integer"):
            CalendarDate("730485")  # type: ignore[arg-type]

    def test_bool_value_rejected(self) -> None:
        with pytest.raises(RangeError, match="non-integer"):
            CalendarDate(True)

    def test_create_invalid_day_zero(self) -> None:
        with pytest.raises(InvalidDayError, match="day must be between 1 and 31"):
            CalendarDate.create(2024, 1, 0)

    def test_create_invalid_day_32(self) -> None:
        with pytest.raises(InvalidDayError, match="day must be between 1 and 31"):
            CalendarDate.create(2024, 1, 32)

    def test_create_feb_29_non_leap(self) -> None:
        with pytest.raises(InvalidDayError, match="day must be between 1 and 28"):
            CalendarDate.create(2023, 2, 29)

    def test_create_feb_29_century(self) -> None:
        with pytest.raises(InvalidDayError):
            CalendarDate.create(1900, 2, 29)
        assert CalendarDate.create(2000, 2, 29).day == 29

    def test_create_april_31(self) -> None:
        with pytest.raises(InvalidDayError):
            CalendarDate.create(2024, 4, 31)

    def test_create_invalid_month(self) -> None:
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            CalendarDate.create(2024, 0, 1)
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            CalendarDate.create(2024, 13, 1)

    def test_create_year_out_of_range(self) -> None:
        with pytest.raises(RangeError, match="year must be between 1 and 9999"):
            CalendarDate.create(0, 12, 31)
        with pytest.raises(RangeError, match="year must be between 1 and 9999"):
            CalendarDate.create(10000, 1, 1)

    def test_create_non_int_component(self) -> None:
        with pytest.raises(TypeError, match="month must be an int"):
            CalendarDate.create(2024, 1.0, 1)  # type: ignore[arg-type]

    def test_create_accepts_month_enum(self) -> None:
        assert CalendarDate.create(2024, Month.FEB, 29) == CalendarDate.create(2024, 2, 29)

    def test_tricky_dates(self) -> None:
        """Jan 1, Dec 31 and the end of February for years 1-3000."""
        for year in range(1, 3001):
            jan1 = CalendarDate.create(year, Month.JAN, 1)
            assert jan1.year == year
            assert jan1.month == Month.JAN
            assert jan1.day == 1
            assert jan1.day_of_year == 0
            assert_sane(jan1)

            dec31 = CalendarDate.create(year, Month.DEC, 31)
            assert dec31.year == year
            assert dec31.month == Month.DEC
            assert dec31.day == 31
            assert dec31.day_of_year == (365 if CalendarDate.is_leap_year(year) else 364)
            assert_sane(dec31)

            if CalendarDate.is_leap_year(year):
                assert CalendarDate.create(year, Month.FEB, 29).year == year
            else:
                mar1 = CalendarDate.create(year, Month.MAR, 1)
                feb28 = CalendarDate.create(year, Month.FEB, 28)
                assert mar1.value - feb28.value == 1

    def test_all_values_through_3000_are_sane(self) -> None:
        for value in range(366, CalendarDate.create(3000, 12, 31).value + 1):
            assert_sane(CalendarDate(value))


class TestCalendarDateStatics:
    """Tests for the static helpers."""

    def test_days_in_month(self) -> None:
        expected = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        assert [CalendarDate.days_in_month(2023, m) for m in Month] == expected
        assert CalendarDate.days_in_month(2020, Month.FEB) == 29

    def test_days_in_month_invalid(self) -> None:
        with pytest.raises(ValidationError):
            CalendarDate.days_in_month(2023, 13)

    def test_is_leap_year(self) -> None:
        assert CalendarDate.is_leap_year(2000) is True
        assert CalendarDate.is_leap_year(2100) is False
        assert CalendarDate.is_leap_year(2400) is True


class TestCalendarDateToday:
    """Tests for CalendarDate.today()."""

    def test_today_matches_local_clock(self) -> None:
        before = datetime.date.today()
        d = CalendarDate.today()
        after = datetime.date.today()
        assert d.to_py_date() in (before, after)

    def test_today_returns_calendar_date(self) -> None:
        assert isinstance(CalendarDate.today(), CalendarDate)


class TestCalendarDateImmutability:
    """Instances never change after construction."""

    def test_cannot_set_attribute(self) -> None:
        d = CalendarDate(Y2K)
        with pytest.raises(AttributeError):
            d._value = 1000  # type: ignore[misc]
        with pytest.raises(AttributeError):
            d.value = 1000  # type: ignore[misc]
        assert d.value == Y2K

    def test_cannot_add_attribute(self) -> None:
        d = CalendarDate(Y2K)
        with pytest.raises(AttributeError):
            d.extra = 1  # type: ignore[attr-defined]

    def test_cannot_delete_attribute(self) -> None:
        d = CalendarDate(Y2K)
        with pytest.raises(AttributeError):
            del d._value

    def test_arithmetic_returns_new_instance(self) -> None:
        d = CalendarDate(Y2K)
        later = d.add_days(1)
        assert later is not d
        assert d.value == Y2K

    def test_copy_and_pickle(self) -> None:
        d = CalendarDate.create(2024, 2, 29)
        assert copy.copy(d) == d
        assert copy.deepcopy(d) == d
        assert pickle.loads(pickle.dumps(d)) == d

    def test_subclass_survives_pickle_and_copy(self) -> None:
        d = Birthday.create(1990, 8, 10)
        restored = pickle.loads(pickle.dumps(d))
        assert type(restored) is Birthday
        assert restored == d
        assert type(copy.copy(d)) is Birthday

    def test_subclass_survives_arithmetic(self) -> None:
        d = Birthday.create(2000, 2, 29)
        assert type(d.add_days(1)) is Birthday
        assert type(d.add_months(1)) is Birthday
        assert type(d.add_years(1)) is Birthday
        assert d.add_years(1) == CalendarDate.create(2001, 3, 1)


class TestCalendarDateComparison:
    """Tests for equality and ordering."""

    def test_sorting(self) -> None:
        dates = [
            CalendarDate.create(2010, 3, 3),
            CalendarDate.create(2020, 4, 4),
            CalendarDate.create(2007, 9, 9),
        ]
        assert ",".join(str(d) for d in sorted(dates)) == "2007-09-09,2010-03-03,2020-04-04"

    def test_equal_dates(self) -> None:
        first, second = D("2010-01-01"), D("2010-01-01")
        assert not first < second
        assert not first.is_before(second)
        assert not first > second
        assert not first.is_after(second)
        assert first.equals(second)
        assert first == second
        assert first <= second
        assert first >= second
        assert int(first) == int(second)

    def test_first_after_second(self) -> None:
        for first, second in [
            (D("2010-01-02"), D("2010-01-01")),
            (D("2023-08-15"), D("2020-09-25")),
        ]:
            assert not first < second
            assert not first.is_before(second)
            assert first > second
            assert first.is_after(second)
            assert not first.equals(second)
            assert first != second

    def test_first_before_second(self) -> None:
        for first, second in [
            (D("2010-01-01"), D("2010-01-02")),
            (D("2013-09-15"), D("2020-03-15")),
        ]:
            assert first < second
            assert first.is_before(second)
            assert not first > second
            assert not first.is_after(second)
            assert not first.equals(second)

    def test_ordering_matches_value(self) -> None:
        a, b = CalendarDate(1000), CalendarDate(2000)
        assert (a < b) == (a.value < b.value)
        assert (a > b) == (a.value > b.value)

    def test_compare_with_other_type(self) -> None:
        d = CalendarDate(Y2K)
        assert d != Y2K
        assert (d == "2000-01-01") is False
        with pytest.raises(TypeError):
            d < Y2K  # type: ignore[operator]

    def test_is_before_rejects_other_type(self) -> None:
        with pytest.raises(TypeError):
            CalendarDate(Y2K).is_before(Y2K)  # type: ignore[arg-type]

    def test_hash(self) -> None:
        assert hash(D("2024-01-15")) == hash(CalendarDate.create(2024, 1, 15))
        assert len({D("2024-01-15"), D("20240115"), D("2024-01-16")}) == 2

    def test_subtract_dates(self) -> None:
        assert D("2024-03-01") - D("2024-02-28") == 2
        assert D("2024-02-28") - D("2024-03-01") == -2

    def test_subtract_non_date(self) -> None:
        with pytest.raises(TypeError):
            D("2024-03-01") - 1  # type: ignore[operator]


class TestCalendarDateRepr:
    """Tests for string representations."""

    def test_str(self) -> None:
        assert str(CalendarDate.create(5, 6, 7)) == "0005-06-07"

    def test_repr(self) -> None:
        assert repr(CalendarDate.create(2024, 1, 15)) == "CalendarDate.create(2024, 1, 15)"

    def test_repr_round_trip(self) -> None:
        d = CalendarDate.create(2024, 1, 15)
        assert eval(repr(d), {"CalendarDate": CalendarDate}) == d

    def test_to_iso_format(self) -> None:
        assert CalendarDate(Y2K).to_iso_format() == "2000-01-01"


class TestShorthand:
    """Tests for the D() shorthand."""

    def test_d_builds_from_string(self) -> None:
        month = "01"
        d = D(f"{2000 + 16}-{month}-31")
        assert d.year == 2016
        assert str(d) == "2016-01-31"

    def test_d_equals_from_string(self) -> None:
        for s in ("1584-10-03", "2000-01-01", "2023-08-17"):
            assert D(s) == CalendarDate.from_string(s)

    def test_d_rejects_bad_string(self) -> None:
        with pytest.raises(ParseError):
            D("2023/08/17")
