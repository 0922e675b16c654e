"""System clock adapter.

The calendar types never read the clock themselves. This module supplies
"today" as a Date from the host's local or UTC calendar date, so callers
that need the current date can pass any ``() -> Date`` callable around,
for example ``today_utc`` in production and a lambda in tests.

Examples:
    >>> from gregorian.clock import ClockSource, today
    >>> d = today(ClockSource.UTC)
    >>> d.year >= 2024
    True
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import TYPE_CHECKING, Callable

from gregorian._internal.constants import DEFAULT_CLOCK_SOURCE
from gregorian._internal.log import log

if TYPE_CHECKING:
    from gregorian.core.date import Date

# Anything that produces the current date
Clock = Callable[[], "Date"]


class ClockSource(str, Enum):
    """Which calendar date the system clock is read as."""

    LOCAL = "local"
    UTC = "utc"


def today(source: ClockSource | str = DEFAULT_CLOCK_SOURCE) -> Date:
    """Return the current date according to the system clock.

    The clock is read exactly once.

    Args:
        source: ClockSource.LOCAL for the host's local date,
                ClockSource.UTC for the UTC date.

    Returns:
        Today's Date.

    Raises:
        ValueError: If source is not a known clock source.
    """
    from gregorian.core.date import Date

    source = ClockSource(source)
    if source is ClockSource.UTC:
        now = datetime.datetime.now(datetime.timezone.utc).date()
    else:
        now = datetime.date.today()

    result = Date(now.year, now.month, now.day)
    log().debug("clock_read", source=source.value, date=result.to_iso_format())
    return result


def today_local() -> Date:
    """Return the host's local date."""
    return today(ClockSource.LOCAL)


def today_utc() -> Date:
    """Return the current UTC date."""
    return today(ClockSource.UTC)


__all__ = [
    "Clock",
    "ClockSource",
    "today",
    "today_local",
    "today_utc",
]
