"""Calendar utilities for gregorian.

This module provides the internal functions behind the public value
types: leap year logic, month lengths, and the conversion between a
(year, month, day) triple and the ordinal day count.

Ordinal day 0 = 0000-03-01 (March 1, year 0)

Counting from March puts February, and with it the leap day, at the end
of each counting year. Every 400-year cycle then starts on a March 1 and
is exactly 146097 days long, and the days inside a cycle split cleanly
into 100-year, 4-year and 1-year sub-cycles.

All functions take and return plain integers. Month numbers are 1-12 and
are assumed to be valid. This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_100_YEARS,
    DAYS_PER_400_YEARS,
    DAYS_PER_4_YEARS,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be 0 or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month.

    Args:
        year: The year (for leap year calculation).
        month: The month (1-12).

    Returns:
        Number of days before the month in that year.
    """
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def month_and_day(year: int, day_of_year: int) -> tuple[int, int]:
    """Convert a 1-based day of year to month and day of month.

    Args:
        year: The year (for leap year calculation).
        day_of_year: Day of year, 1 to days_in_year(year).

    Returns:
        Tuple of (month, day).
    """
    for month in range(MONTHS_PER_YEAR, 0, -1):
        before = days_before_month(year, month)
        if day_of_year > before:
            return (month, day_of_year - before)
    raise ValueError(f"day of year must be positive, got {day_of_year}")


def shift_months(year: int, month: int, months: int) -> tuple[int, int]:
    """Shift a year and month by a signed number of months.

    The year and month are flattened into a single month index, offset,
    and split again. Python's // and % round toward negative infinity,
    so January minus one month is December of the previous year.

    Args:
        year: The year.
        month: The month (1-12).
        months: Number of months to add (can be negative).

    Returns:
        Tuple of (year, month).

    Examples:
        >>> shift_months(2020, 1, -1)
        (2019, 12)
        >>> shift_months(2020, 11, 14)
        (2022, 1)
    """
    index = year * MONTHS_PER_YEAR + (month - 1) + months
    new_year, new_month = divmod(index, MONTHS_PER_YEAR)
    return (new_year, new_month + 1)


def ymd_to_ordinal_day_count(year: int, month: int, day: int) -> int:
    """Convert year, month, day to the ordinal day count.

    The ordinal day count for 0000-03-01 is 0. Dates before it have
    negative day counts.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The ordinal day count.

    Examples:
        >>> ymd_to_ordinal_day_count(0, 3, 1)
        0
        >>> ymd_to_ordinal_day_count(0, 2, 29)
        -1
        >>> ymd_to_ordinal_day_count(400, 3, 1)
        146097
    """
    # Years counted from March: January and February belong to the
    # previous counting year.
    if month > 2:
        march_month = month - 3
    else:
        march_month = month + 9
        year -= 1

    n400, year_of_cycle = divmod(year, 400)
    n100, year_of_century = divmod(year_of_cycle, 100)
    n4, n1 = divmod(year_of_century, 4)

    # Month lengths from March repeat in groups of five (31, 30, 31, 30, 31),
    # which (153 * m + 2) // 5 sums without a table.
    day_of_march_year = (153 * march_month + 2) // 5 + day - 1

    return (
        n400 * DAYS_PER_400_YEARS
        + n100 * DAYS_PER_100_YEARS
        + n4 * DAYS_PER_4_YEARS
        + n1 * DAYS_PER_YEAR
        + day_of_march_year
    )


def ordinal_day_count_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert the ordinal day count to year, month, day.

    Args:
        days: The ordinal day count (0 = 0000-03-01).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_day_count_to_ymd(0)
        (0, 3, 1)
        >>> ordinal_day_count_to_ymd(-1)
        (0, 2, 29)
    """
    n400, days = divmod(days, DAYS_PER_400_YEARS)

    # The last day of a 400-year cycle is the extra leap day of the
    # fourth century, and the last day of a 4-year cycle is the leap day
    # of its fourth year. Cap the quotients so those days stay in the
    # final sub-cycle instead of starting a new one.
    n100 = min(days // DAYS_PER_100_YEARS, 3)
    days -= n100 * DAYS_PER_100_YEARS

    n4, days = divmod(days, DAYS_PER_4_YEARS)

    n1 = min(days // DAYS_PER_YEAR, 3)
    days -= n1 * DAYS_PER_YEAR

    year = 400 * n400 + 100 * n100 + 4 * n4 + n1

    # days is now the 0-based day of the March-based year.
    march_month = (5 * days + 2) // 153
    day = days - (153 * march_month + 2) // 5 + 1
    if march_month < 10:
        month = march_month + 3
    else:
        month = march_month - 9
        year += 1

    return (year, month, day)


def iso_year(year: int) -> str:
    """Format a year for ISO 8601 text.

    Years 0-9999 use four digits. Negative years carry a leading minus
    and years past 9999 a leading plus, both zero-padded to four digits.

    Examples:
        >>> iso_year(44)
        '0044'
        >>> iso_year(-44)
        '-0044'
        >>> iso_year(12345)
        '+12345'
    """
    if year < 0:
        return f"-{-year:04d}"
    if year > 9999:
        return f"+{year}"
    return f"{year:04d}"


__all__ = [
    "iso_year",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "month_and_day",
    "shift_months",
    "ymd_to_ordinal_day_count",
    "ordinal_day_count_to_ymd",
]
