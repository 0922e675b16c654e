"""ISO 8601 formatting and parsing.

This module provides functions for converting calendar values to and from
ISO 8601 extended-format strings:

Dates:
    - YYYY-MM-DD
    - -YYYY-MM-DD (negative years, astronomical numbering)
    - +YYYYY-MM-DD (years with more than four digits)

Year-months:
    - YYYY-MM

Years:
    - YYYY (formatting only)

Syntax errors raise ParseError. Well-formed input naming a date that does
not exist, such as 2021-02-29, raises an InvalidDate subclass.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from gregorian._internal.calendar import iso_year
from gregorian.errors import ParseError

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth

# Type alias for calendar values with a text form
CalendarType = Union["Date", "YearMonth", "Year"]

_DATE_SHAPE = re.compile(r"^[+-]?\d+-\d+-\d+$")
_YEAR_MONTH_SHAPE = re.compile(r"^[+-]?\d+-\d+$")


def parse_iso8601(s: str) -> Date | YearMonth:
    """Parse an ISO 8601 string into a Date or a YearMonth.

    Leading and trailing whitespace is ignored. Three dash-separated
    components parse as a Date, two as a YearMonth.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        A Date or YearMonth depending on the input.

    Raises:
        ParseError: If the string is not valid ISO 8601 format.
        InvalidDate: If the parsed components do not exist.

    Examples:
        >>> parse_iso8601("2024-01-15")
        Date(2024, 1, 15)

        >>> parse_iso8601("2024-01")
        YearMonth(2024, 1)

        >>> parse_iso8601("-0044-03-15")
        Date(-44, 3, 15)
    """
    from gregorian.core.date import Date
    from gregorian.core.year_month import YearMonth

    if not isinstance(s, str):
        raise ParseError(f"expected str, got {type(s).__name__}", s)

    s = s.strip()
    if not s:
        raise ParseError("empty string", s)

    if _DATE_SHAPE.match(s):
        return Date.from_iso_format(s)
    if _YEAR_MONTH_SHAPE.match(s):
        return YearMonth.from_iso_format(s)

    raise ParseError(
        f"cannot determine ISO 8601 format for: {s!r}. "
        "Expected date (YYYY-MM-DD) or year-month (YYYY-MM)",
        s,
    )


def format_iso8601(value: CalendarType) -> str:
    """Format a calendar value as an ISO 8601 string.

    Args:
        value: A Date, YearMonth, or Year to format.

    Returns:
        ISO 8601 formatted string.

    Raises:
        TypeError: If value is not a supported calendar type.

    Examples:
        >>> from gregorian import Date, Year, YearMonth
        >>> format_iso8601(Date(2024, 1, 15))
        '2024-01-15'

        >>> format_iso8601(YearMonth(-44, 3))
        '-0044-03'

        >>> format_iso8601(Year(12345))
        '+12345'
    """
    from gregorian.core.date import Date
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth

    if isinstance(value, (Date, YearMonth)):
        return value.to_iso_format()
    if isinstance(value, Year):
        return iso_year(value.to_number())

    raise TypeError(f"expected Date, YearMonth, or Year, got {type(value).__name__}")


__all__ = [
    "parse_iso8601",
    "format_iso8601",
]
