from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from app.services.pricing_models.brackets import Rate
from app.services.pricing_models.cumulative import fill_brackets


def calculate(weight: Decimal, rates: Sequence[Rate], limits: Sequence[Any]) -> Decimal | None:
    return fill_brackets(weight, rates, limits, flat_first=True)
