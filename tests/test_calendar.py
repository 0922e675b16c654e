"""Tests for the internal calendar math."""

from __future__ import annotations

import pytest

from gregorian._internal.calendar import (
    days_before_month,
    days_in_month,
    days_in_year,
    is_leap_year,
    iso_year,
    month_and_day,
    ordinal_day_count_to_ymd,
    shift_months,
    ymd_to_ordinal_day_count,
)
from gregorian._internal.constants import (
    DAYS_PER_400_YEARS,
    UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO,
)


class TestLeapYears:
    """Tests for the leap year rule."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (1900, False),
            (2000, True),
            (2020, True),
            (1901, False),
            (0, True),
            (-4, True),
            (-100, False),
            (-400, True),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Test century and quad-century exceptions, including negative years."""
        assert is_leap_year(year) is expected

    def test_days_in_year(self) -> None:
        """Test year lengths."""
        assert days_in_year(2020) == 366
        assert days_in_year(2021) == 365
        assert days_in_year(1900) == 365


class TestMonthLengths:
    """Tests for month length tables."""

    def test_days_in_month_table(self) -> None:
        """Test every month of a common year."""
        lengths = [days_in_month(2021, m) for m in range(1, 13)]
        assert lengths == [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

    def test_february(self) -> None:
        """Test that February follows the leap year rule."""
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29

    def test_days_before_month(self) -> None:
        """Test cumulative day counts, with the leap day after February."""
        assert days_before_month(2019, 1) == 0
        assert days_before_month(2019, 3) == 59
        assert days_before_month(2020, 3) == 60
        assert days_before_month(2020, 12) == 335

    def test_month_and_day(self) -> None:
        """Test splitting a day of year into month and day."""
        assert month_and_day(2019, 1) == (1, 1)
        assert month_and_day(2019, 60) == (3, 1)
        assert month_and_day(2020, 60) == (2, 29)
        assert month_and_day(2020, 366) == (12, 31)


class TestShiftMonths:
    """Tests for month index carry."""

    def test_within_year(self) -> None:
        """Test a shift that stays in the same year."""
        assert shift_months(2020, 1, 5) == (2020, 6)

    def test_forward_carry(self) -> None:
        """Test carrying into the next year."""
        assert shift_months(2020, 12, 1) == (2021, 1)
        assert shift_months(2020, 11, 27) == (2023, 2)

    def test_backward_carry_uses_floor_division(self) -> None:
        """Test that negative shifts across January borrow a year."""
        assert shift_months(2020, 1, -1) == (2019, 12)
        assert shift_months(2020, 1, -13) == (2018, 12)
        assert shift_months(0, 1, -1) == (-1, 12)


class TestOrdinalDayCount:
    """Tests for the ordinal day count conversion."""

    def test_epoch(self) -> None:
        """Test that 0000-03-01 is day zero."""
        assert ymd_to_ordinal_day_count(0, 3, 1) == 0
        assert ordinal_day_count_to_ymd(0) == (0, 3, 1)

    def test_day_before_epoch(self) -> None:
        """Test that the day before the epoch is the leap day of year 0."""
        assert ymd_to_ordinal_day_count(0, 2, 29) == -1
        assert ordinal_day_count_to_ymd(-1) == (0, 2, 29)

    def test_full_cycle(self) -> None:
        """Test that a 400 year cycle is 146097 days."""
        assert ymd_to_ordinal_day_count(400, 3, 1) == DAYS_PER_400_YEARS
        assert ymd_to_ordinal_day_count(-400, 3, 1) == -DAYS_PER_400_YEARS

    def test_last_day_of_cycle(self) -> None:
        """Test the leap day at the end of a 400 year cycle."""
        assert ordinal_day_count_to_ymd(DAYS_PER_400_YEARS - 1) == (400, 2, 29)

    def test_end_of_century(self) -> None:
        """Test the day before March 1 of a non-leap century year."""
        count = ymd_to_ordinal_day_count(100, 3, 1)
        assert ordinal_day_count_to_ymd(count - 1) == (100, 2, 28)

    def test_unix_epoch(self) -> None:
        """Test that 1970-01-01 lands on the known day count."""
        count = ymd_to_ordinal_day_count(1970, 1, 1)
        assert count + 60 == UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO


class TestIsoYear:
    """Tests for ISO 8601 year text."""

    @pytest.mark.parametrize(
        "year,expected",
        [
            (2020, "2020"),
            (44, "0044"),
            (0, "0000"),
            (-1, "-0001"),
            (-44, "-0044"),
            (9999, "9999"),
            (10000, "+10000"),
        ],
    )
    def test_iso_year(self, year: int, expected: str) -> None:
        """Test padding and sign of year text."""
        assert iso_year(year) == expected
