"""Calendar formatting and parsing.

This module provides functions for converting calendar values to and from
ISO 8601 string representations.

Functions:
    parse_iso8601: Parse an ISO 8601 date or year-month string.
    format_iso8601: Format a Date, YearMonth or Year as an ISO 8601 string.

Examples:
    >>> from gregorian import Date
    >>> from gregorian.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2024-01-15")
    Date(2024, 1, 15)

    >>> format_iso8601(Date(2024, 1, 15))
    '2024-01-15'
"""

from __future__ import annotations

from gregorian.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
]
