"""Epoch conversion utilities for dates.

This module provides functions for converting between dates and
Unix epoch-based counts.

Functions:
    to_unix_seconds: Convert a Date to the Unix timestamp of its midnight UTC.
    from_unix_seconds: Return the Date containing a Unix timestamp.
    to_unix_days: Convert a Date to days since 1970-01-01.
    from_unix_days: Create a Date from days since 1970-01-01.

The Unix epoch is 1970-01-01 00:00:00 UTC. Leap seconds are not counted,
so every day is exactly 86400 seconds long.

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import to_unix_seconds, from_unix_seconds

    >>> to_unix_seconds(Date(1970, 1, 1))
    0

    >>> from_unix_seconds(1592611200)
    Date(2020, 6, 20)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gregorian._internal.constants import UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO

if TYPE_CHECKING:
    from gregorian.core.date import Date


def to_unix_seconds(date: "Date") -> int:
    """Convert a Date to the Unix timestamp of 00:00 UTC on that day.

    Examples:
        >>> from gregorian import Date
        >>> to_unix_seconds(Date(1969, 12, 31))
        -86400
    """
    return date.to_unix_timestamp()


def from_unix_seconds(seconds: int | float) -> "Date":
    """Return the Date containing a Unix timestamp.

    Timestamps before the epoch round down to the day they fall in.

    Examples:
        >>> from_unix_seconds(-1)
        Date(1969, 12, 31)
    """
    from gregorian.core.date import Date

    return Date.from_unix_timestamp(seconds)


def to_unix_days(date: "Date") -> int:
    """Convert a Date to the number of days since 1970-01-01.

    Examples:
        >>> from gregorian import Date
        >>> to_unix_days(Date(2000, 1, 1))
        10957
    """
    return date.days_since_year_zero() - UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO


def from_unix_days(days: int) -> "Date":
    """Create a Date from the number of days since 1970-01-01.

    Examples:
        >>> from_unix_days(10957)
        Date(2000, 1, 1)
    """
    from gregorian.core.date import Date

    return Date.from_days_since_year_zero(UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO + days)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_days",
    "from_unix_days",
]
