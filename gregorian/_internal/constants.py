"""Internal constants for gregorian.

These constants define the calendar tables and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

MONTHS_PER_YEAR: int = 12

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in the year before the first of each month (non-leap year)
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Cycle lengths of the Gregorian calendar
DAYS_PER_YEAR: int = 365
DAYS_PER_4_YEARS: int = 4 * DAYS_PER_YEAR + 1  # 1_461
DAYS_PER_100_YEARS: int = 25 * DAYS_PER_4_YEARS - 1  # 36_524
DAYS_PER_400_YEARS: int = 4 * DAYS_PER_100_YEARS + 1  # 146_097

# The ordinal day count is anchored at 0000-03-01, which puts the leap day
# at the very end of every cycle.
# Days from 0000-01-01 to 0000-03-01 (year 0 is a leap year)
ORDINAL_EPOCH_DAYS_SINCE_YEAR_ZERO: int = 31 + 29

# Days from 0000-01-01 to 1970-01-01
UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO: int = 4 * DAYS_PER_400_YEARS + 370 * DAYS_PER_YEAR + 90

SECONDS_PER_DAY: int = 24 * 60 * 60  # 86_400

# Clock source used by Date.today() and gregorian.clock.today()
DEFAULT_CLOCK_SOURCE: str = "local"

# Name of the stdlib logger the library logs to
LOGGER_NAME: str = "gregorian"


__all__ = [
    "MONTHS_PER_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "DAYS_PER_YEAR",
    "DAYS_PER_4_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_400_YEARS",
    "ORDINAL_EPOCH_DAYS_SINCE_YEAR_ZERO",
    "UNIX_EPOCH_DAYS_SINCE_YEAR_ZERO",
    "SECONDS_PER_DAY",
    "DEFAULT_CLOCK_SOURCE",
    "LOGGER_NAME",
]
