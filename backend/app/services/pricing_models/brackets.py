"""Bracket lookup and rate-cell helpers shared by every pricing model.

A bracket limit is the inclusive upper bound of its bracket: bracket 0 covers
``(0, limits[0]]`` and bracket ``i`` covers ``(limits[i-1], limits[i]]``.
"""

import math
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

Rate = Decimal | float | int | str | None


def is_valid_rate(rate: Any) -> bool:
    """Return True when a rate cell holds a usable finite number.

    Unset cells (``None``), empty-string placeholders and anything that does
    not parse as a finite number do not take part in a calculation.
    """
    if rate is None or isinstance(rate, bool):
        return False
    if isinstance(rate, str) and not rate.strip():
        return False
    try:
        return Decimal(str(rate)).is_finite()
    except (InvalidOperation, ValueError):
        return False


def to_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def rate_at(rates: Sequence[Rate], index: int) -> Decimal | None:
    """Return the rate of a bracket, or None when the cell is unset or invalid.

    Vectors shorter than the limits are treated as unset past their end.
    """
    if index < 0 or index >= len(rates):
        return None
    rate = rates[index]
    if not is_valid_rate(rate):
        return None
    return to_decimal(rate)


def bracket_index(weight: Any, limits: Sequence[Any]) -> int | None:
    """Return the index of the bracket a weight falls into.

    The weight is truncated toward zero before comparing, so 5.9 is looked
    up as 5 and a fractional weight just over a limit stays in that limit's
    bracket. Returns None when the weight exceeds the largest limit.
    """
    effective = math.floor(to_decimal(weight))
    for i, limit in enumerate(limits):
        if effective <= to_decimal(limit):
            return i
    return None


def bracket_range(index: int, limits: Sequence[Any]) -> tuple[Decimal, Decimal]:
    """Return the ``(start, end)`` display range of a bracket, e.g. ``(51, 100)``."""
    start = Decimal(1) if index == 0 else to_decimal(limits[index - 1]) + 1
    return start, to_decimal(limits[index])


def max_limit(limits: Sequence[Any]) -> Decimal | None:
    if not limits:
        return None
    return to_decimal(limits[-1])
