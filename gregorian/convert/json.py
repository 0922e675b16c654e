"""JSON serialization and deserialization for calendar values.

This module provides functions for converting calendar values to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a calendar value to a JSON-serializable dict.
    from_json: Create a calendar value from a JSON dict.

Every dictionary carries a type tag for polymorphic deserialization:

    {"_type": "Date", "value": "2024-01-15"}
    {"_type": "YearMonth", "year": 2024, "month": 1}
    {"_type": "Year", "value": 2024}
    {"_type": "Month", "value": 1}

Examples:
    >>> from gregorian import Date
    >>> from gregorian.convert import to_json, from_json

    >>> data = to_json(Date(2024, 1, 15))
    >>> data['_type']
    'Date'

    >>> from_json(data)
    Date(2024, 1, 15)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from gregorian.errors import ParseError

if TYPE_CHECKING:
    from gregorian.core.date import Date
    from gregorian.core.month import Month
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth

# Type alias for calendar values
CalendarType = Union["Date", "YearMonth", "Year", "Month"]


def to_json(value: CalendarType) -> dict[str, Any]:
    """Convert a calendar value to a JSON-serializable dictionary.

    Args:
        value: A Date, YearMonth, Year, or Month to convert.

    Returns:
        A JSON-serializable dictionary with type information.

    Raises:
        TypeError: If value is not a supported calendar type.

    Examples:
        >>> from gregorian import Date, Month, Year, YearMonth

        >>> to_json(Date(2024, 1, 15))
        {'_type': 'Date', 'value': '2024-01-15'}

        >>> to_json(YearMonth(2024, 1))
        {'_type': 'YearMonth', 'year': 2024, 'month': 1}

        >>> to_json(Year(-44))
        {'_type': 'Year', 'value': -44}

        >>> to_json(Month.MARCH)
        {'_type': 'Month', 'value': 3}
    """
    # Import here to avoid circular imports
    from gregorian.core.date import Date
    from gregorian.core.month import Month
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth

    if isinstance(value, (Date, YearMonth)):
        return value.to_json()
    elif isinstance(value, Year):
        return {"_type": "Year", "value": value.to_number()}
    elif isinstance(value, Month):
        return {"_type": "Month", "value": value.to_number()}
    else:
        raise TypeError(
            f"expected Date, YearMonth, Year, or Month, got {type(value).__name__}"
        )


def from_json(data: dict[str, Any]) -> CalendarType:
    """Create a calendar value from a JSON dictionary.

    The dictionary must include a `_type` field specifying the type to create.

    Args:
        data: A dictionary produced by to_json().

    Returns:
        A Date, YearMonth, Year, or Month based on the `_type` field.

    Raises:
        ParseError: If the data is missing required fields or has invalid format.
        InvalidDate: If the data names a month or day that does not exist.
        TypeError: If `_type` is not a recognized calendar type.

    Examples:
        >>> from_json({'_type': 'Date', 'value': '2024-01-15'})
        Date(2024, 1, 15)

        >>> from_json({'_type': 'Month', 'value': 12})
        <Month.DECEMBER: 12>
    """
    # Import here to avoid circular imports
    from gregorian.core.date import Date
    from gregorian.core.month import Month
    from gregorian.core.year import Year
    from gregorian.core.year_month import YearMonth

    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}", data)

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data", data)

    if type_name == "Date":
        return Date.from_json(data)

    elif type_name == "YearMonth":
        return YearMonth.from_json(data)

    elif type_name in ("Year", "Month"):
        value = data.get("value")
        if not isinstance(value, int) or isinstance(value, bool):
            raise ParseError(f"'value' must be an integer for {type_name}", data)
        if type_name == "Year":
            return Year(value)
        return Month(value)

    else:
        raise TypeError(f"unknown calendar type: {type_name!r}")


__all__ = [
    "to_json",
    "from_json",
]
