from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from app.services.pricing_models.brackets import Rate, rate_at, to_decimal


def calculate(weight: Decimal, rates: Sequence[Rate], limits: Sequence[Any]) -> Decimal | None:
    base_flat = rate_at(rates, 0)
    excess_rate = rate_at(rates, 1)
    if base_flat is None or excess_rate is None or not limits:
        return None

    units = to_decimal(weight)
    base_limit = to_decimal(limits[0])
    if units <= base_limit:
        return base_flat
    return base_flat + (units - base_limit) * excess_rate
