"""Calendar conversion utilities.

This module provides functions for converting calendar values to and from
other representations:
    - JSON serialization and deserialization
    - Unix epoch conversions (seconds and days)

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import to_json, from_json

    >>> d = Date(2024, 1, 15)
    >>> data = to_json(d)
    >>> restored = from_json(data)
    >>> restored == d
    True

    >>> from gregorian.convert import to_unix_seconds, from_unix_seconds
    >>> from_unix_seconds(to_unix_seconds(d)) == d
    True
"""

from __future__ import annotations

from gregorian.convert.epoch import (
    from_unix_days,
    from_unix_seconds,
    to_unix_days,
    to_unix_seconds,
)
from gregorian.convert.json import from_json, to_json

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_days",
    "from_unix_days",
]
