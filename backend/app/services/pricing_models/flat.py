from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from app.services.pricing_models.brackets import Rate, bracket_index, rate_at


def calculate(weight: Decimal, rates: Sequence[Rate], limits: Sequence[Any]) -> Decimal | None:
    index = bracket_index(weight, limits)
    if index is None:
        return None
    return rate_at(rates, index)
