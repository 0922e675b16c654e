"""Month enumeration for the twelve calendar months.

This module provides the Month enum with a fixed 1-12 numbering and
wrap-around arithmetic.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from gregorian._internal.constants import MONTHS_PER_YEAR
from gregorian.errors import InvalidMonth

if TYPE_CHECKING:
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth


class Month(IntEnum):
    """A month of the Gregorian calendar.

    Months are numbered 1 (January) through 12 (December). Month is an
    IntEnum, so it compares and hashes like its number. Constructing a
    Month from any other value raises InvalidMonth.

    Month arithmetic wraps around: it never carries into a year. Use
    YearMonth when the year should follow along.

    Examples:
        >>> Month(3)
        <Month.MARCH: 3>
        >>> Month.DECEMBER.wrapping_add(2)
        <Month.FEBRUARY: 2>
        >>> Month.MARCH == 3
        True
        >>> Month(13)
        Traceback (most recent call last):
        ...
        gregorian.errors.InvalidMonth: invalid month number: expected 1-12, got 13
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def _missing_(cls, value: object) -> Month:
        raise InvalidMonth(value)  # type: ignore[arg-type]

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Create a Month from its number.

        Args:
            number: The month number (1-12).

        Returns:
            The corresponding Month.

        Raises:
            InvalidMonth: If number is outside 1-12.
        """
        return cls(number)

    def to_number(self) -> int:
        """Return the month number in the range 1-12."""
        return int(self)

    def with_year(self, year: Year | int) -> YearMonth:
        """Combine the month with a year to create a YearMonth.

        Examples:
            >>> Month.FEBRUARY.with_year(2020)
            YearMonth(2020, 2)
        """
        from gregorian.core.year_month import YearMonth

        return YearMonth(year, self)

    def wrapping_add(self, count: int) -> Month:
        """Add a number of months, wrapping back to January after December.

        Args:
            count: Number of months to add (can be negative).

        Returns:
            The resulting month.

        Examples:
            >>> Month.JANUARY.wrapping_add(13)
            <Month.FEBRUARY: 2>
        """
        return Month((self - 1 + count) % MONTHS_PER_YEAR + 1)

    def wrapping_sub(self, count: int) -> Month:
        """Subtract a number of months, wrapping back to December after January.

        Examples:
            >>> Month.JANUARY.wrapping_sub(2)
            <Month.NOVEMBER: 11>
        """
        return self.wrapping_add(-count)

    def wrapping_next(self) -> Month:
        """Return the next month, wrapping back to January after December."""
        return self.wrapping_add(1)

    def wrapping_prev(self) -> Month:
        """Return the previous month, wrapping back to December after January."""
        return self.wrapping_add(-1)

    def __str__(self) -> str:
        """Return the English month name, e.g. 'February'."""
        return self.name.capitalize()


__all__ = ["Month"]
