"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar, including year 0 and negative
years.
"""

from __future__ import annotations

import operator
import re
from typing import TYPE_CHECKING

from gregorian._internal.calendar import (
    days_before_month,
    days_in_month,
    iso_year,
    ordinal_day_count_to_ymd,
    ymd_to_ordinal_day_count,
)
from gregorian._internal.constants import (
    ORDINAL_EPOCH_DAYS_SINCE_YEAR_ZERO,
    SECONDS_PER_DAY,
    UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO,
)
from gregorian.arithmetic.rounding import Rounding, resolve
from gregorian.core.month import Month
from gregorian.core.year import Year
from gregorian.core.year_month import YearMonth
from gregorian.errors import InvalidDayOfMonth, ParseError

if TYPE_CHECKING:
    from gregorian.clock import ClockSource

_ISO_DATE = re.compile(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$")


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. It uses the proleptic Gregorian calendar, which means
    the Gregorian calendar rules are extended to dates before its
    actual adoption in 1582, with astronomical year numbering where
    year 0 exists and equals 1 BCE.

    A Date is always valid: construction is the only place a year,
    month and day are checked, and every operation returns a new Date.

    Day arithmetic goes through the ordinal day count and never fails.
    Month and year arithmetic keeps the day of the month and raises
    InvalidDayOfMonth when that day does not exist in the resulting
    month, unless a rounding direction is given.

    Attributes:
        year: The Year.
        month: The Month.
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2020, 1, 31)
        >>> d.day_of_year
        31
        >>> d.add_days(30)
        Date(2020, 3, 1)
        >>> d.add_months(1)
        Traceback (most recent call last):
        ...
        gregorian.errors.InvalidDayOfMonth: invalid day for February 2020: expected 1-29, got 31
        >>> d.add_months(1, rounding=Rounding.PREV_VALID)
        Date(2020, 2, 29)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: Year | int, month: Month | int, day: int) -> None:
        """Create a Date from year, month, and day.

        The month is checked before the day.

        Args:
            year: A Year or a year number (can be 0 or negative).
            month: A Month or a month number (1-12).
            day: The day of the month.

        Raises:
            InvalidMonth: If month is outside 1-12.
            InvalidDayOfMonth: If the month has no such day.

        Examples:
            >>> Date(2024, 2, 29)
            Date(2024, 2, 29)

            >>> Date(2023, 2, 29)
            Traceback (most recent call last):
            ...
            gregorian.errors.InvalidDayOfMonth: invalid day for February 2023: expected 1-28, got 29
        """
        year_month = YearMonth(year, month)
        day = operator.index(day)
        if day < 1 or day > year_month.total_days:
            raise InvalidDayOfMonth(year_month.year, year_month.month, day)

        self._year = year_month.year
        self._month = year_month.month
        self._day = day

    @classmethod
    def _from_valid(cls, year: int, month: int, day: int) -> Date:
        """Build a Date from components already known to be valid."""
        date = cls.__new__(cls)
        date._year = Year(year)
        date._month = Month(month)
        date._day = day
        return date

    @classmethod
    def today(cls, source: ClockSource | str | None = None) -> Date:
        """Return today's date from the system clock.

        Args:
            source: "local" or "utc"; defaults to the local date.

        Examples:
            >>> Date.today().year >= 2024
            True
        """
        from gregorian.clock import today

        if source is None:
            return today()
        return today(source)

    @classmethod
    def from_ordinal_day_count(cls, days: int) -> Date:
        """Create a Date from its ordinal day count.

        The ordinal day count is the number of days since 0000-03-01,
        which has day count 0. Every integer maps to exactly one date.

        Examples:
            >>> Date.from_ordinal_day_count(0)
            Date(0, 3, 1)
            >>> Date.from_ordinal_day_count(-1)
            Date(0, 2, 29)
        """
        return cls._from_valid(*ordinal_day_count_to_ymd(operator.index(days)))

    @classmethod
    def from_days_since_year_zero(cls, days: int) -> Date:
        """Create a Date from the number of days since 0000-01-01.

        Examples:
            >>> Date.from_days_since_year_zero(366)
            Date(1, 1, 1)
        """
        return cls.from_ordinal_day_count(days - ORDINAL_EPOCH_DAYS_SINCE_YEAR_ZERO)

    @classmethod
    def from_unix_timestamp(cls, seconds: int | float) -> Date:
        """Return the date containing a Unix timestamp.

        The timestamp is the number of seconds since 1970-01-01 00:00 UTC,
        not counting leap seconds. Timestamps before the epoch round down
        to the day they fall in.

        Examples:
            >>> Date.from_unix_timestamp(0)
            Date(1970, 1, 1)
            >>> Date.from_unix_timestamp(-1)
            Date(1969, 12, 31)
        """
        days = int(seconds // SECONDS_PER_DAY)
        return cls.from_days_since_year_zero(UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO + days)

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        Supports negative years (-YYYY-MM-DD) and years with more than
        four digits (+YYYYY-MM-DD).

        Args:
            s: The ISO 8601 date string.

        Returns:
            The parsed Date.

        Raises:
            ParseError: If the string is not in YYYY-MM-DD format.
            InvalidDate: If the components do not form a valid date.

        Examples:
            >>> Date.from_iso_format("2020-02-29")
            Date(2020, 2, 29)

            >>> Date.from_iso_format("-0044-03-15")
            Date(-44, 3, 15)
        """
        match = _ISO_DATE.match(s) if isinstance(s, str) else None
        if not match:
            raise ParseError(
                f"invalid date syntax: expected \"YYYY-MM-DD\", got {s!r}", s
            )

        return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    @property
    def year(self) -> Year:
        """Return the year."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        return self._day

    @property
    def year_month(self) -> YearMonth:
        """Return the year and month of this date as a YearMonth."""
        return YearMonth(self._year, self._month)

    @property
    def day_of_year(self) -> int:
        """Return the day of the year.

        Returns:
            Day of year (1-366).

        Examples:
            >>> Date(2020, 2, 1).day_of_year
            32
            >>> Date(2020, 12, 31).day_of_year  # Leap year
            366
            >>> Date(2019, 12, 31).day_of_year  # Non-leap year
            365
        """
        return days_before_month(self._year.to_number(), self._month) + self._day

    @property
    def days_remaining_in_year(self) -> int:
        """Return the number of days left in the year, counting this date.

        Examples:
            >>> Date(2020, 1, 1).days_remaining_in_year
            366
            >>> Date(2020, 12, 31).days_remaining_in_year
            1
        """
        return self._year.length_in_days - self.day_of_year + 1

    def to_ordinal_day_count(self) -> int:
        """Return the number of days since 0000-03-01.

        Examples:
            >>> Date(0, 3, 1).to_ordinal_day_count()
            0
            >>> Date(400, 3, 1).to_ordinal_day_count()
            146097
        """
        return ymd_to_ordinal_day_count(self._year.to_number(), self._month, self._day)

    def days_since_year_zero(self) -> int:
        """Return the number of days since 0000-01-01.

        Examples:
            >>> Date(0, 1, 1).days_since_year_zero()
            0
            >>> Date(1, 1, 1).days_since_year_zero()
            366
        """
        return self.to_ordinal_day_count() + ORDINAL_EPOCH_DAYS_SINCE_YEAR_ZERO

    def to_unix_timestamp(self) -> int:
        """Return the Unix timestamp of 00:00 UTC on this date.

        Examples:
            >>> Date(1970, 1, 2).to_unix_timestamp()
            86400
        """
        days = self.days_since_year_zero() - UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO
        return days * SECONDS_PER_DAY

    def replace(
        self,
        year: Year | int | None = None,
        month: Month | int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Any unspecified components retain their current values.

        Raises:
            InvalidDate: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def next(self) -> Date:
        """Return the following day."""
        if self._day == days_in_month(self._year.to_number(), self._month):
            return self.year_month.next().first_day
        return Date._from_valid(self._year.to_number(), self._month, self._day + 1)

    def prev(self) -> Date:
        """Return the preceding day."""
        if self._day == 1:
            return self.year_month.prev().last_day
        return Date._from_valid(self._year.to_number(), self._month, self._day - 1)

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Examples:
            >>> Date(2000, 1, 1).add_days(36525)
            Date(2100, 1, 1)
            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        return Date.from_ordinal_day_count(self.to_ordinal_day_count() + days)

    def sub_days(self, days: int) -> Date:
        """Return a new Date moved back by the given number of days."""
        return self.add_days(-days)

    def add_months(self, months: int, *, rounding: Rounding | None = None) -> Date:
        """Return a new Date offset by the given number of months.

        The day of the month is kept. If the resulting month is too short
        for it, InvalidDayOfMonth is raised, carrying the resulting year
        and month and the original day, unless a rounding direction is
        given.

        Args:
            months: Number of months to add (can be negative).
            rounding: Optional direction to round an invalid result in.

        Returns:
            A new Date offset by the specified months.

        Raises:
            InvalidDayOfMonth: If the day does not exist in the resulting
                month and no rounding was requested.

        Examples:
            >>> Date(2020, 1, 31).add_months(2)
            Date(2020, 3, 31)
            >>> Date(2020, 1, 31).add_months(1, rounding=Rounding.NEXT_VALID)
            Date(2020, 3, 1)
        """
        if rounding is not None:
            return resolve(self.add_months, months, rounding=rounding)
        return self.year_month.add_months(months).with_day(self._day)

    def sub_months(self, months: int, *, rounding: Rounding | None = None) -> Date:
        """Return a new Date moved back by the given number of months.

        See add_months() for the handling of days that do not exist.
        """
        return self.add_months(-months, rounding=rounding)

    def add_years(self, years: int, *, rounding: Rounding | None = None) -> Date:
        """Return a new Date offset by the given number of years.

        Only February 29 can become invalid, when the resulting year is
        not a leap year.

        Args:
            years: Number of years to add (can be negative).
            rounding: Optional direction to round an invalid result in.

        Raises:
            InvalidDayOfMonth: If the resulting date does not exist and no
                rounding was requested.

        Examples:
            >>> Date(2020, 2, 29).add_years(4)
            Date(2024, 2, 29)
            >>> Date(2020, 2, 29).add_years(1, rounding=Rounding.PREV_VALID)
            Date(2021, 2, 28)
        """
        if rounding is not None:
            return resolve(self.add_years, years, rounding=rounding)
        return self.year_month.add_years(years).with_day(self._day)

    def sub_years(self, years: int, *, rounding: Rounding | None = None) -> Date:
        """Return a new Date moved back by the given number of years."""
        return self.add_years(-years, rounding=rounding)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'

            >>> Date(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year = iso_year(self._year.to_number())
        return f"{year}-{self._month.to_number():02d}-{self._day:02d}"

    def to_json(self) -> dict:
        """Return the date as a JSON-serializable dictionary.

        Examples:
            >>> Date(2024, 1, 15).to_json()
            {'_type': 'Date', 'value': '2024-01-15'}
        """
        return {"_type": "Date", "value": self.to_iso_format()}

    @classmethod
    def from_json(cls, data: dict) -> Date:
        """Create a Date from a JSON dictionary.

        Args:
            data: Dictionary with a value key holding YYYY-MM-DD.

        Raises:
            ParseError: If the data is invalid.
            InvalidDate: If the value is not a valid date.
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected dict, got {type(data).__name__}", data)

        value = data.get("value")
        if not value:
            raise ParseError("missing 'value' field for Date", data)

        return cls.from_iso_format(value)

    def _key(self) -> tuple[int, int, int]:
        return (self._year.to_number(), self._month.to_number(), self._day)

    def __sub__(self, other: object) -> int:
        """Return the number of days from other to this date.

        Examples:
            >>> Date(2021, 1, 1) - Date(2020, 1, 1)
            366
        """
        if not isinstance(other, Date):
            return NotImplemented
        return self.to_ordinal_day_count() - other.to_ordinal_day_count()

    def __eq__(self, other: object) -> bool:
        """Check equality with another date."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """Return a detailed string representation, e.g. 'Date(2024, 1, 15)'."""
        return f"Date({self._year.to_number()}, {self._month.to_number()}, {self._day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


__all__ = ["Date"]
