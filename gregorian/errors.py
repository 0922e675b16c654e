"""Gregorian exception hierarchy.

All gregorian-specific exceptions inherit from GregorianError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.month import Month
    from gregorian.core.year import Year


class GregorianError(Exception):
    """Base exception for all gregorian errors."""

    pass


class InvalidDate(GregorianError):
    """A date component is out of range.

    Raised when a year, month and day do not form a date that exists
    in the proleptic Gregorian calendar.

    Examples:
        - Month value outside 1-12
        - Day value outside the valid range for its month
        - Day of year outside 1-365 (or 1-366 in a leap year)
    """

    pass


class InvalidMonth(InvalidDate):
    """Month number outside 1-12.

    Attributes:
        number: The rejected month number.
    """

    def __init__(self, number: int) -> None:
        self.number = number
        super().__init__(f"invalid month number: expected 1-12, got {number}")

    def __reduce__(self):
        return (type(self), (self.number,))


class InvalidDayOfMonth(InvalidDate):
    """Day number that does not exist in its month.

    Raised by Date construction and by month or year arithmetic that
    lands on a day past the end of the resulting month. The error keeps
    the resulting year and month together with the requested day, so the
    caller can round to the nearest valid date in either direction.

    Attributes:
        year: The year of the invalid date.
        month: The month of the invalid date.
        day: The requested day of the month.

    Examples:
        >>> from gregorian import Date
        >>> try:
        ...     Date(2020, 1, 31).add_months(1)
        ... except InvalidDayOfMonth as e:
        ...     e.next_valid(), e.prev_valid()
        (Date(2020, 3, 1), Date(2020, 2, 29))
    """

    def __init__(self, year: Year | int, month: Month | int, day: int) -> None:
        from gregorian.core.year_month import YearMonth

        year_month = YearMonth(year, month)
        self.year = year_month.year
        self.month = year_month.month
        self.day = day
        super().__init__(
            f"invalid day for {self.month!s} {self.year!s}: "
            f"expected 1-{year_month.total_days}, got {day}"
        )

    def __reduce__(self):
        return (type(self), (self.year, self.month, self.day))

    def next_valid(self) -> Date:
        """Return the first day of the month after the invalid date.

        Any excess days in the invalid date are ignored.
        """
        from gregorian.core.year_month import YearMonth

        return YearMonth(self.year, self.month).next().first_day

    def prev_valid(self) -> Date:
        """Return the last day of the month of the invalid date.

        Any excess days in the invalid date are ignored.
        """
        from gregorian.core.year_month import YearMonth

        return YearMonth(self.year, self.month).last_day


class InvalidDayOfYear(InvalidDate):
    """Day of year outside the length of its year.

    Attributes:
        year: The year.
        day: The rejected day of the year.
    """

    def __init__(self, year: Year | int, day: int) -> None:
        from gregorian.core.year import Year

        year = Year(year)
        self.year = year
        self.day = day
        super().__init__(
            f"invalid day of year for {year!s}: "
            f"expected 1-{year.length_in_days}, got {day}"
        )

    def __reduce__(self):
        return (type(self), (self.year, self.day))


class ParseError(GregorianError):
    """Failed to parse a textual or JSON representation.

    Raised when input is not syntactically a calendar value. Input that
    is well formed but names a date that does not exist raises an
    InvalidDate subclass instead.

    Attributes:
        data: The offending input.
    """

    def __init__(self, message: str, data: object = None) -> None:
        self.data = data
        super().__init__(message)


__all__ = [
    "GregorianError",
    "InvalidDate",
    "InvalidMonth",
    "InvalidDayOfMonth",
    "InvalidDayOfYear",
    "ParseError",
]
