"""Core calendar types.

This module provides the fundamental calendar types:
    - Month: The twelve months, numbered 1-12, with wrap-around arithmetic
    - Year: A signed year in the proleptic Gregorian calendar
    - YearMonth: A specific month of a specific year
    - Date: A calendar date in the proleptic Gregorian calendar
"""

from __future__ import annotations

from gregorian.core.date import Date
from gregorian.core.month import Month
from gregorian.core.year import Year
from gregorian.core.year_month import YearMonth

__all__: list[str] = [
    "Date",
    "Month",
    "Year",
    "YearMonth",
]
