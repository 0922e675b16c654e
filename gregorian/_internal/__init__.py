"""Internal utilities for gregorian.

This module contains private implementation details:
    - Calendar math (leap years, month lengths, ordinal day counts)
    - Constants and magic numbers
    - Structured logging helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from gregorian._internal.calendar import (
    days_before_month,
    days_in_month,
    days_in_year,
    is_leap_year,
    iso_year,
    month_and_day,
    ordinal_day_count_to_ymd,
    shift_months,
    ymd_to_ordinal_day_count,
)
from gregorian._internal.log import configure_logging, log

__all__: list[str] = [
    "configure_logging",
    "days_before_month",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "iso_year",
    "log",
    "month_and_day",
    "ordinal_day_count_to_ymd",
    "shift_months",
    "ymd_to_ordinal_day_count",
]
