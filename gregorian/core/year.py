"""Year class representing a calendar year.

This module provides the Year class, a signed year number in the
proleptic Gregorian calendar with astronomical numbering (year 0 exists
and equals 1 BCE).
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING

from gregorian._internal.calendar import days_in_year, is_leap_year, month_and_day
from gregorian.errors import InvalidDayOfYear

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.month import Month
    from gregorian.core.year_month import YearMonth


class Year:
    """A calendar year in the proleptic Gregorian calendar.

    Any integer is a valid year, including 0 and negative years. Year
    compares, hashes and converts like its number, so ``Year(2020) == 2020``
    holds.

    Examples:
        >>> Year(2020).is_leap_year
        True
        >>> Year(1900).length_in_days
        365
        >>> Year(2020).first_day
        Date(2020, 1, 1)
        >>> Year(2020) + 5
        Year(2025)
    """

    __slots__ = ("_year",)

    def __init__(self, year: Year | int) -> None:
        """Create a Year from its number.

        Args:
            year: The year number, or another Year.

        Raises:
            TypeError: If year is not an integer.
        """
        if isinstance(year, Year):
            year = year._year
        self._year = operator.index(year)

    def to_number(self) -> int:
        """Return the year as a plain integer."""
        return self._year

    @property
    def is_leap_year(self) -> bool:
        """Return True if this year has a leap day (February 29).

        Examples:
            >>> Year(2000).is_leap_year  # Divisible by 400
            True
            >>> Year(2100).is_leap_year  # Divisible by 100 but not 400
            False
            >>> Year(0).is_leap_year
            True
        """
        return is_leap_year(self._year)

    @property
    def length_in_days(self) -> int:
        """Return the number of days in the year: 366 for leap years, else 365."""
        return days_in_year(self._year)

    def next(self) -> Year:
        """Return the following year."""
        return Year(self._year + 1)

    def prev(self) -> Year:
        """Return the preceding year."""
        return Year(self._year - 1)

    def with_month(self, month: Month | int) -> YearMonth:
        """Combine the year with a month to create a YearMonth.

        Args:
            month: A Month or a month number (1-12).

        Raises:
            InvalidMonth: If month is outside 1-12.

        Examples:
            >>> Year(2020).with_month(3).last_day
            Date(2020, 3, 31)
        """
        from gregorian.core.year_month import YearMonth

        return YearMonth(self, month)

    def with_day_of_year(self, day: int) -> Date:
        """Return the date for a 1-based day of this year.

        Args:
            day: The day of the year, 1 through length_in_days.

        Returns:
            The corresponding Date.

        Raises:
            InvalidDayOfYear: If day is outside the year.

        Examples:
            >>> Year(2020).with_day_of_year(60)
            Date(2020, 2, 29)
            >>> Year(2019).with_day_of_year(60)
            Date(2019, 3, 1)
        """
        from gregorian.core.date import Date

        if day < 1 or day > self.length_in_days:
            raise InvalidDayOfYear(self, day)
        month, day_of_month = month_and_day(self._year, day)
        return Date(self, month, day_of_month)

    @property
    def months(self) -> tuple[YearMonth, ...]:
        """Return all twelve months of the year in order."""
        from gregorian.core.month import Month

        return tuple(self.with_month(month) for month in Month)

    @property
    def first_month(self) -> YearMonth:
        """Return January of this year."""
        return self.with_month(1)

    @property
    def last_month(self) -> YearMonth:
        """Return December of this year."""
        return self.with_month(12)

    @property
    def first_day(self) -> Date:
        """Return January 1 of this year."""
        return self.first_month.first_day

    @property
    def last_day(self) -> Date:
        """Return December 31 of this year."""
        return self.last_month.last_day

    def __add__(self, other: object) -> Year:
        if isinstance(other, Year) or not isinstance(other, int):
            return NotImplemented
        return Year(self._year + other)

    def __sub__(self, other: object) -> Year:
        if isinstance(other, Year) or not isinstance(other, int):
            return NotImplemented
        return Year(self._year - other)

    def __int__(self) -> int:
        return self._year

    def __index__(self) -> int:
        return self._year

    def __eq__(self, other: object) -> bool:
        """Check equality with another Year or an integer."""
        if isinstance(other, Year):
            return self._year == other._year
        if isinstance(other, int):
            return self._year == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year < int(other)
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year <= int(other)
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year > int(other)
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, (Year, int)):
            return self._year >= int(other)
        return NotImplemented

    def __hash__(self) -> int:
        """Return a hash equal to the hash of the year number."""
        return hash(self._year)

    def __repr__(self) -> str:
        return f"Year({self._year})"

    def __str__(self) -> str:
        """Return the year zero-padded to four digits, e.g. '0044' or '-0044'."""
        if self._year < 0:
            return f"-{-self._year:04d}"
        return f"{self._year:04d}"


__all__ = ["Year"]
