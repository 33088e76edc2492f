from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from app.models.rate_table import PricingModel
from app.services.pricing_models import (
    cumulative,
    excess,
    fixed,
    flat,
    min_cumulative,
    min_excess,
    min_fixed,
)
from app.services.pricing_models.brackets import Rate, bracket_index, max_limit, to_decimal

# Every model shares the (weight, rates, limits) signature and returns
# None when it cannot price the weight.
CalculatorFn = Callable[[Decimal, Sequence[Rate], Sequence[Any]], Decimal | None]

_CALCULATORS: dict[PricingModel, CalculatorFn] = {
    PricingModel.FIXED: fixed.calculate,
    PricingModel.FLAT: flat.calculate,
    PricingModel.MIN_FIXED: min_fixed.calculate,
    PricingModel.CUMULATIVE: cumulative.calculate,
    PricingModel.MIN_CUMULATIVE: min_cumulative.calculate,
    PricingModel.MIN_EXCESS: min_excess.calculate,
    PricingModel.EXCESS: excess.calculate,
}


class OutcomeStatus(str, Enum):
    OK = "ok"
    OVER_LIMIT = "over_limit"  # Weight exceeds the largest configured limit
    MISSING_RATE = "missing_rate"  # A required bracket rate is blank or invalid


@dataclass(frozen=True)
class PriceOutcome:
    """Result of pricing one weight against one rate vector."""

    status: OutcomeStatus
    amount: Decimal | None
    bracket_index: int | None
    max_limit: Decimal | None

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.OK


def get_pricing_calculator(model: PricingModel) -> CalculatorFn:
    return _CALCULATORS[model]


def price(
    model: PricingModel,
    weight: Decimal,
    rates: Sequence[Rate],
    limits: Sequence[Any],
) -> PriceOutcome:
    """Price a chargeable weight and classify any failure.

    A failed calculation is reported as over-limit when the weight is above
    the largest limit (or there are no brackets at all), otherwise as a
    missing rate.
    """
    weight = to_decimal(weight)
    amount = get_pricing_calculator(model)(weight, rates, limits)
    top = max_limit(limits)
    index = bracket_index(weight, limits)

    if amount is not None:
        status = OutcomeStatus.OK
    elif top is None or weight > top:
        status = OutcomeStatus.OVER_LIMIT
    else:
        status = OutcomeStatus.MISSING_RATE

    return PriceOutcome(status=status, amount=amount, bracket_index=index, max_limit=top)
