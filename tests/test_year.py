"""Tests for the Year class."""

from __future__ import annotations

import pytest

from gregorian import Date, InvalidDate, InvalidDayOfYear, Month, Year, YearMonth


class TestYearConstruction:
    """Tests for Year construction."""

    @pytest.mark.parametrize("number", [2020, 0, -44, 12345, -10**12])
    def test_any_integer_is_valid(self, number: int) -> None:
        """Test that construction never fails for integers."""
        assert Year(number).to_number() == number

    def test_from_year(self) -> None:
        """Test that a Year can be built from another Year."""
        assert Year(Year(2020)) == Year(2020)

    def test_non_integer_rejected(self) -> None:
        """Test that non-integers raise TypeError."""
        with pytest.raises(TypeError):
            Year(2020.5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Year("2020")  # type: ignore[arg-type]


class TestYearProperties:
    """Tests for leap year and length."""

    @pytest.mark.parametrize(
        "number,expected",
        [(1900, False), (2000, True), (2020, True), (1901, False), (0, True), (-4, True)],
    )
    def test_is_leap_year(self, number: int, expected: bool) -> None:
        """Test the leap year rule."""
        assert Year(number).is_leap_year is expected

    def test_length_in_days(self) -> None:
        """Test 366 days in leap years and 365 otherwise."""
        assert Year(2020).length_in_days == 366
        assert Year(2019).length_in_days == 365
        assert Year(2100).length_in_days == 365


class TestYearComposition:
    """Tests for combining a Year into months and dates."""

    def test_with_month(self) -> None:
        """Test combining a year with a month."""
        assert Year(2020).with_month(Month.MARCH) == YearMonth(2020, 3)
        assert Year(2020).with_month(3) == YearMonth(2020, 3)

    def test_with_month_invalid(self) -> None:
        """Test that an invalid month number is rejected."""
        with pytest.raises(InvalidDate):
            Year(2020).with_month(13)

    def test_march_boundaries(self) -> None:
        """Test the first and last day of March 2020."""
        assert Year(2020).with_month(Month.MARCH).first_day == Date(2020, 3, 1)
        assert Year(2020).with_month(Month.MARCH).last_day == Date(2020, 3, 31)

    def test_first_and_last_day(self) -> None:
        """Test the boundary dates of a year."""
        assert Year(2020).first_day == Date(2020, 1, 1)
        assert Year(2020).last_day == Date(2020, 12, 31)
        assert Year(-1).last_day == Date(-1, 12, 31)

    def test_months(self) -> None:
        """Test that months lists all twelve months in order."""
        months = Year(2020).months
        assert len(months) == 12
        assert months[0] == YearMonth(2020, 1)
        assert months[-1] == YearMonth(2020, 12)
        assert sum(m.total_days for m in months) == 366

    def test_first_and_last_month(self) -> None:
        """Test January and December accessors."""
        assert Year(2020).first_month == YearMonth(2020, Month.JANUARY)
        assert Year(2020).last_month == YearMonth(2020, Month.DECEMBER)


class TestYearDayOfYear:
    """Tests for Year.with_day_of_year()."""

    def test_first_and_last(self) -> None:
        """Test the first and last day of the year."""
        assert Year(2019).with_day_of_year(1) == Date(2019, 1, 1)
        assert Year(2019).with_day_of_year(365) == Date(2019, 12, 31)
        assert Year(2020).with_day_of_year(366) == Date(2020, 12, 31)

    def test_day_60(self) -> None:
        """Test that day 60 depends on the leap year."""
        assert Year(2020).with_day_of_year(60) == Date(2020, 2, 29)
        assert Year(2019).with_day_of_year(60) == Date(2019, 3, 1)

    @pytest.mark.parametrize("day", [0, -1, 366])
    def test_out_of_range_common_year(self, day: int) -> None:
        """Test that days outside a common year are rejected."""
        with pytest.raises(InvalidDayOfYear, match="expected 1-365") as excinfo:
            Year(2019).with_day_of_year(day)
        assert excinfo.value.year == Year(2019)
        assert excinfo.value.day == day

    def test_out_of_range_leap_year(self) -> None:
        """Test that day 367 is rejected in a leap year."""
        with pytest.raises(InvalidDayOfYear, match="expected 1-366"):
            Year(2020).with_day_of_year(367)

    def test_inverse_of_day_of_year(self) -> None:
        """Test that with_day_of_year inverts Date.day_of_year."""
        year = Year(2024)
        for day in range(1, year.length_in_days + 1):
            assert year.with_day_of_year(day).day_of_year == day


class TestYearArithmetic:
    """Tests for Year stepping and integer offsets."""

    def test_next_and_prev(self) -> None:
        """Test stepping across year 0."""
        assert Year(0).next() == Year(1)
        assert Year(0).prev() == Year(-1)

    def test_add_and_sub_int(self) -> None:
        """Test integer offsets."""
        assert Year(2020) + 5 == Year(2025)
        assert Year(2020) - 2021 == Year(-1)

    def test_add_year_not_supported(self) -> None:
        """Test that adding two Years is rejected."""
        with pytest.raises(TypeError):
            Year(2020) + Year(1)  # type: ignore[operator]


class TestYearComparison:
    """Tests for Year ordering, hashing, and text."""

    def test_ordering(self) -> None:
        """Test total ordering by number."""
        assert Year(-1) < Year(0) < Year(1)
        assert Year(2020) >= Year(2020)
        assert sorted([Year(3), Year(-3), Year(0)]) == [Year(-3), Year(0), Year(3)]

    def test_compares_with_int(self) -> None:
        """Test comparison with plain integers."""
        assert Year(2020) == 2020
        assert Year(2020) != 2021
        assert Year(2020) < 2021

    def test_hash(self) -> None:
        """Test that equal years hash equally."""
        assert hash(Year(2020)) == hash(Year(2020))
        assert len({Year(2020), Year(2020), Year(2021)}) == 2

    def test_int_and_index(self) -> None:
        """Test conversion to int."""
        assert int(Year(-44)) == -44
        assert [10, 20, 30][Year(1)] == 20

    def test_repr_and_str(self) -> None:
        """Test text forms."""
        assert repr(Year(2020)) == "Year(2020)"
        assert str(Year(44)) == "0044"
        assert str(Year(-44)) == "-0044"
        assert str(Year(12345)) == "12345"

    def test_not_equal_to_other_types(self) -> None:
        """Test comparison with unrelated types."""
        assert Year(2020) != "2020"
        with pytest.raises(TypeError):
            Year(2020) < "2021"  # type: ignore[operator]
