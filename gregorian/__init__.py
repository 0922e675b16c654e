"""Gregorian: calendar dates in the proleptic Gregorian calendar.

Gregorian provides immutable calendar values with no time of day and no
time zone. Years are unbounded and use astronomical numbering, so year 0
exists and equals 1 BCE.

Core Types:
    Month: The twelve months, with wrap-around arithmetic
    Year: A signed calendar year
    YearMonth: A specific month of a specific year
    Date: A calendar date (year, month, day)

Arithmetic:
    Rounding: Direction to round a day that does not exist
    or_next_valid: Round an invalid result to the first day of the next month
    or_prev_valid: Round an invalid result to the last day of its month

Format Functions:
    parse_iso8601: Parse an ISO 8601 date or year-month string
    format_iso8601: Format a calendar value as an ISO 8601 string

Exceptions:
    GregorianError: Base exception
    InvalidDate: A date component is out of range
    InvalidMonth: Month number outside 1-12
    InvalidDayOfMonth: Day that does not exist in its month
    InvalidDayOfYear: Day of year outside its year
    ParseError: Failed to parse text or JSON

Example:
    >>> from gregorian import Date, Rounding
    >>> d = Date(2020, 1, 31)
    >>> d.add_days(30)
    Date(2020, 3, 1)
    >>> d.add_months(1, rounding=Rounding.PREV_VALID)
    Date(2020, 2, 29)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from gregorian.core.date import Date
from gregorian.core.month import Month
from gregorian.core.year import Year
from gregorian.core.year_month import YearMonth

# Arithmetic
from gregorian.arithmetic import Rounding, or_next_valid, or_prev_valid

# Exceptions
from gregorian.errors import (
    GregorianError,
    InvalidDate,
    InvalidDayOfMonth,
    InvalidDayOfYear,
    InvalidMonth,
    ParseError,
)

# Format functions
from gregorian.format import format_iso8601, parse_iso8601

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Month",
    "Year",
    "YearMonth",
    # Arithmetic
    "Rounding",
    "or_next_valid",
    "or_prev_valid",
    # Exceptions
    "GregorianError",
    "InvalidDate",
    "InvalidMonth",
    "InvalidDayOfMonth",
    "InvalidDayOfYear",
    "ParseError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
