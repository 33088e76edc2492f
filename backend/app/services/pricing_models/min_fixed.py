from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from app.services.pricing_models import fixed
from app.services.pricing_models.brackets import Rate, rate_at, to_decimal


def calculate(weight: Decimal, rates: Sequence[Rate], limits: Sequence[Any]) -> Decimal | None:
    # The first bracket is a flat minimum, compared against the raw weight
    if limits and to_decimal(weight) <= to_decimal(limits[0]):
        return rate_at(rates, 0)
    return fixed.calculate(weight, rates, limits)
