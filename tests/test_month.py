"""Tests for the Month enumeration."""

from __future__ import annotations

import pickle

import pytest

from gregorian import InvalidDate, InvalidMonth, Month, YearMonth


class TestMonthConstruction:
    """Tests for Month construction and validation."""

    def test_from_number(self) -> None:
        """Test construction from each valid month number."""
        for number in range(1, 13):
            assert Month(number).to_number() == number
            assert Month.from_number(number) is Month(number)

    def test_members_in_order(self) -> None:
        """Test that iteration yields January through December."""
        months = list(Month)
        assert len(months) == 12
        assert months[0] is Month.JANUARY
        assert months[-1] is Month.DECEMBER

    @pytest.mark.parametrize("number", [0, 13, -1, 100])
    def test_invalid_number(self, number: int) -> None:
        """Test that numbers outside 1-12 raise InvalidMonth."""
        with pytest.raises(InvalidMonth, match="expected 1-12") as excinfo:
            Month(number)
        assert excinfo.value.number == number

    def test_invalid_month_is_invalid_date(self) -> None:
        """Test that InvalidMonth can be caught as InvalidDate."""
        with pytest.raises(InvalidDate):
            Month.from_number(13)

    def test_invalid_month_message(self) -> None:
        """Test the error message wording."""
        with pytest.raises(InvalidMonth) as excinfo:
            Month(13)
        assert str(excinfo.value) == "invalid month number: expected 1-12, got 13"

    def test_invalid_month_pickles(self) -> None:
        """Test that InvalidMonth survives a pickle round trip."""
        error = pickle.loads(pickle.dumps(InvalidMonth(13)))
        assert isinstance(error, InvalidMonth)
        assert error.number == 13


class TestMonthArithmetic:
    """Tests for wrap-around month arithmetic."""

    def test_wrapping_add(self) -> None:
        """Test adding months without crossing December."""
        assert Month.JANUARY.wrapping_add(1) is Month.FEBRUARY
        assert Month.MARCH.wrapping_add(0) is Month.MARCH

    def test_wrapping_add_past_december(self) -> None:
        """Test that December + 2 is February."""
        assert Month.DECEMBER.wrapping_add(2) is Month.FEBRUARY

    def test_wrapping_add_multiple_years(self) -> None:
        """Test offsets larger than a year."""
        assert Month.JANUARY.wrapping_add(13) is Month.FEBRUARY
        assert Month.JUNE.wrapping_add(120) is Month.JUNE

    def test_wrapping_add_negative(self) -> None:
        """Test that negative offsets wrap backwards."""
        assert Month.JANUARY.wrapping_add(-1) is Month.DECEMBER
        assert Month.MARCH.wrapping_add(-14) is Month.JANUARY

    def test_wrapping_sub(self) -> None:
        """Test subtracting months."""
        assert Month.JANUARY.wrapping_sub(2) is Month.NOVEMBER
        assert Month.DECEMBER.wrapping_sub(-1) is Month.JANUARY

    def test_wrapping_next_and_prev(self) -> None:
        """Test single step wrap-around."""
        assert Month.DECEMBER.wrapping_next() is Month.JANUARY
        assert Month.JANUARY.wrapping_prev() is Month.DECEMBER
        assert Month.JULY.wrapping_next() is Month.AUGUST


class TestMonthConversions:
    """Tests for Month conversions and text."""

    def test_with_year(self) -> None:
        """Test combining a month with a year."""
        assert Month.FEBRUARY.with_year(2020) == YearMonth(2020, 2)

    def test_compares_like_number(self) -> None:
        """Test that Month compares and orders like its number."""
        assert Month.MARCH == 3
        assert Month.JANUARY < Month.DECEMBER

    def test_str(self) -> None:
        """Test that str() gives the English month name."""
        assert str(Month.JANUARY) == "January"
        assert str(Month.SEPTEMBER) == "September"
        assert f"{Month.MAY!s}" == "May"
