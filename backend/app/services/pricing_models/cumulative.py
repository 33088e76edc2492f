from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from app.services.pricing_models.brackets import Rate, rate_at, to_decimal


def calculate(weight: Decimal, rates: Sequence[Rate], limits: Sequence[Any]) -> Decimal | None:
    return fill_brackets(weight, rates, limits, flat_first=False)


def fill_brackets(
    weight: Decimal,
    rates: Sequence[Rate],
    limits: Sequence[Any],
    flat_first: bool,
) -> Decimal | None:
    """Walk the brackets in order, billing each for the weight it absorbs.

    Bracket ``i`` absorbs at most ``limits[i] - limits[i-1]`` units. With
    ``flat_first`` the first bracket charges its rate once instead of per
    unit. Every bracket visited before the weight is used up needs a valid
    rate, and the last bracket must absorb whatever is left.
    """
    total = Decimal(0)
    remaining = to_decimal(weight)
    prev_limit = Decimal(0)

    for i, raw_limit in enumerate(limits):
        rate = rate_at(rates, i)
        if rate is None:
            return None

        limit = to_decimal(raw_limit)
        fill = min(remaining, limit - prev_limit)
        if fill > 0:
            total += rate if flat_first and i == 0 else fill * rate
            remaining -= fill

        prev_limit = limit
        if remaining <= 0:
            break

    if remaining > 0:
        return None
    return total
