"""YearMonth class representing a month of a specific year.

YearMonth is the unit at which month length and day-of-year offsets are
defined, and the unit month arithmetic operates on.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from gregorian._internal.calendar import (
    days_before_month,
    days_in_month,
    iso_year,
    shift_months,
)
from gregorian.core.month import Month
from gregorian.core.year import Year
from gregorian.errors import ParseError

if TYPE_CHECKING:
    from gregorian.core.date import Date

_ISO_YEAR_MONTH = re.compile(r"^([+-]?\d{4,})-(\d{2})$")


class YearMonth:
    """A specific month in a specific year.

    Any year combined with any month is valid, so month and year
    arithmetic on a YearMonth never fails.

    Attributes:
        year: The Year.
        month: The Month.

    Examples:
        >>> YearMonth(2020, 2).total_days
        29
        >>> YearMonth(1900, Month.FEBRUARY).total_days
        28
        >>> YearMonth(2020, 1).sub_months(1)
        YearMonth(2019, 12)
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: Year | int, month: Month | int) -> None:
        """Create a YearMonth from a year and a month.

        Args:
            year: A Year or a year number.
            month: A Month or a month number (1-12).

        Raises:
            InvalidMonth: If month is outside 1-12.
        """
        self._year = Year(year)
        self._month = Month(month)

    @classmethod
    def from_iso_format(cls, s: str) -> YearMonth:
        """Parse a year-month in ISO 8601 format (YYYY-MM).

        Args:
            s: The string to parse, e.g. "2020-02" or "-0044-03".

        Returns:
            The parsed YearMonth.

        Raises:
            ParseError: If the string is not in YYYY-MM format.
            InvalidMonth: If the month is outside 1-12.
        """
        match = _ISO_YEAR_MONTH.match(s) if isinstance(s, str) else None
        if not match:
            raise ParseError(
                f"invalid year-month syntax: expected \"YYYY-MM\", got {s!r}", s
            )
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def year(self) -> Year:
        """Return the year."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month."""
        return self._month

    @property
    def total_days(self) -> int:
        """Return the number of days in this month (28-31).

        Examples:
            >>> YearMonth(2000, 2).total_days
            29
            >>> YearMonth(2021, 4).total_days
            30
        """
        return days_in_month(self._year.to_number(), self._month)

    @property
    def day_of_year(self) -> int:
        """Return the 1-based day of the year of the first day of this month.

        Examples:
            >>> YearMonth(2019, 3).day_of_year
            60
            >>> YearMonth(2020, 3).day_of_year
            61
        """
        return days_before_month(self._year.to_number(), self._month) + 1

    @property
    def first_day(self) -> Date:
        """Return the first day of this month."""
        return self.with_day(1)

    @property
    def last_day(self) -> Date:
        """Return the last day of this month."""
        return self.with_day(self.total_days)

    def with_day(self, day: int) -> Date:
        """Return the date for a day of this month.

        Args:
            day: The day of the month.

        Returns:
            The corresponding Date.

        Raises:
            InvalidDayOfMonth: If the month has no such day.
        """
        from gregorian.core.date import Date

        return Date(self._year, self._month, day)

    def next(self) -> YearMonth:
        """Return the following month, moving to January of the next year after December."""
        return self.add_months(1)

    def prev(self) -> YearMonth:
        """Return the preceding month, moving to December of the previous year after January."""
        return self.add_months(-1)

    def add_months(self, months: int) -> YearMonth:
        """Return a new YearMonth offset by the given number of months.

        Whole years overflowing the month carry into the year.

        Args:
            months: Number of months to add (can be negative).

        Examples:
            >>> YearMonth(2020, 11).add_months(3)
            YearMonth(2021, 2)
            >>> YearMonth(2020, 1).add_months(-13)
            YearMonth(2018, 12)
        """
        year, month = shift_months(self._year.to_number(), self._month, months)
        return YearMonth(year, month)

    def sub_months(self, months: int) -> YearMonth:
        """Return a new YearMonth moved back by the given number of months."""
        return self.add_months(-months)

    def add_years(self, years: int) -> YearMonth:
        """Return a new YearMonth with the same month, offset by years."""
        return YearMonth(self._year + years, self._month)

    def sub_years(self, years: int) -> YearMonth:
        """Return a new YearMonth with the same month, moved back by years."""
        return self.add_years(-years)

    def to_iso_format(self) -> str:
        """Return the year-month as an ISO 8601 string (YYYY-MM).

        Examples:
            >>> YearMonth(2020, 2).to_iso_format()
            '2020-02'
        """
        return f"{iso_year(self._year.to_number())}-{self._month.to_number():02d}"

    def to_json(self) -> dict:
        """Return the year-month as a JSON-serializable dictionary.

        Examples:
            >>> YearMonth(2020, 2).to_json()
            {'_type': 'YearMonth', 'year': 2020, 'month': 2}
        """
        return {
            "_type": "YearMonth",
            "year": self._year.to_number(),
            "month": self._month.to_number(),
        }

    @classmethod
    def from_json(cls, data: dict) -> YearMonth:
        """Create a YearMonth from a JSON dictionary.

        Args:
            data: Dictionary with year and month keys.

        Raises:
            ParseError: If the data is missing fields or is not a dict.
            InvalidMonth: If the month is outside 1-12.
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected dict, got {type(data).__name__}", data)

        year = data.get("year")
        month = data.get("month")
        if not isinstance(year, int) or not isinstance(month, int):
            raise ParseError("'year' and 'month' must be integers for YearMonth", data)

        return cls(year, month)

    def _key(self) -> tuple[int, int]:
        return (self._year.to_number(), self._month.to_number())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"YearMonth({self._year.to_number()}, {self._month.to_number()})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["YearMonth"]
