"""Calendar arithmetic helpers.

Month and year arithmetic on Date raises InvalidDayOfMonth when the
resulting day does not exist. The functions in this module apply the
"nearest valid date" resolution uniformly, so callers can opt into
rounding without inspecting the error:

Rounding Operations (from gregorian.arithmetic.rounding):
    - Rounding: NEXT_VALID / PREV_VALID direction enum
    - resolve: Call a computation, rounding in a given direction
    - or_next_valid: Round to the first day of the next month
    - or_prev_valid: Round to the last day of the resulting month
"""

from __future__ import annotations

from gregorian.arithmetic.rounding import (
    Rounding,
    or_next_valid,
    or_prev_valid,
    resolve,
)

__all__: list[str] = [
    "Rounding",
    "resolve",
    "or_next_valid",
    "or_prev_valid",
]
