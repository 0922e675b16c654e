"""Rounding of invalid month and year arithmetic.

Shifting a date by whole months or years can land on a day that does not
exist in the resulting month, such as January 31 plus one month. Date
raises InvalidDayOfMonth in that case. The helpers in this module turn
that failure into the nearest valid date in a chosen direction:

    - Rounding.NEXT_VALID: the first day of the following month
    - Rounding.PREV_VALID: the last day of the resulting month

Examples:
    >>> from gregorian import Date
    >>> from gregorian.arithmetic import or_next_valid, or_prev_valid

    >>> or_next_valid(Date(2020, 1, 31).add_months, 1)
    Date(2020, 3, 1)
    >>> or_prev_valid(Date(2020, 1, 31).add_months, 1)
    Date(2020, 2, 29)
    >>> or_next_valid(Date(2020, 1, 31).add_months, 2)  # valid, unchanged
    Date(2020, 3, 31)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from gregorian._internal.log import log
from gregorian.errors import InvalidDayOfMonth

if TYPE_CHECKING:
    from gregorian.core.date import Date


class Rounding(Enum):
    """Direction to round a date that does not exist.

    Examples:
        >>> from gregorian.errors import InvalidDayOfMonth
        >>> Rounding.PREV_VALID.apply(InvalidDayOfMonth(2021, 2, 29))
        Date(2021, 2, 28)
    """

    NEXT_VALID = "next_valid"
    PREV_VALID = "prev_valid"

    def apply(self, error: InvalidDayOfMonth) -> Date:
        """Return the valid date this rounding picks for an invalid one."""
        if self is Rounding.NEXT_VALID:
            return error.next_valid()
        return error.prev_valid()


def resolve(
    func: Callable[..., Date],
    *args: Any,
    rounding: Rounding,
    **kwargs: Any,
) -> Date:
    """Call a date computation, rounding an invalid day of month.

    Args:
        func: Callable returning a Date or raising InvalidDayOfMonth,
              typically a bound add_months/add_years method.
        *args: Positional arguments for func.
        rounding: Direction to round in if func raises InvalidDayOfMonth.
        **kwargs: Keyword arguments for func.

    Returns:
        The result of func, or the rounded date if the result was invalid.
    """
    try:
        return func(*args, **kwargs)
    except InvalidDayOfMonth as error:
        result = rounding.apply(error)
        log().debug(
            "invalid_day_rounded",
            rounding=rounding.value,
            year=error.year.to_number(),
            month=error.month.to_number(),
            day=error.day,
            result=result.to_iso_format(),
        )
        return result


def or_next_valid(func: Callable[..., Date], *args: Any, **kwargs: Any) -> Date:
    """Return func(*args, **kwargs), or the next valid date if it is invalid.

    The next valid date is the first day of the month after the invalid
    date. Excess days are ignored.
    """
    return resolve(func, *args, rounding=Rounding.NEXT_VALID, **kwargs)


def or_prev_valid(func: Callable[..., Date], *args: Any, **kwargs: Any) -> Date:
    """Return func(*args, **kwargs), or the previous valid date if it is invalid.

    The previous valid date is the last day of the month of the invalid
    date. Excess days are ignored.
    """
    return resolve(func, *args, rounding=Rounding.PREV_VALID, **kwargs)


__all__ = [
    "Rounding",
    "resolve",
    "or_next_valid",
    "or_prev_valid",
]
