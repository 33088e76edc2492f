"""Quote a shipment against a client's rate table."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.rate_table import RateTable
from app.repositories.bracket_schedule_repository import BracketScheduleRepository
from app.repositories.route_repository import RouteRepository
from app.schemas.quote import QuoteRequest
from app.services.bracket_service import format_number, range_label
from app.services.chargeable_weight import compute_chargeable_weight
from app.services.pricing_models.factory import OutcomeStatus, PriceOutcome, price
from app.services.rate_table_service import RateTableService

_CENTS = Decimal("0.01")


class RouteNotFoundError(ValueError):
    """No route of the selected table matches the origin and destination."""


def display_amount(amount: Decimal) -> str:
    """Two-decimal amount with thousands separators, e.g. ``1,250.50``."""
    return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_UP):,.2f}"


def describe_outcome(
    outcome: PriceOutcome,
    model_name: str,
    basis_label: str,
    weight: Decimal,
    limits: list[Decimal],
) -> str:
    """Human-readable explanation of a priced or failed quote."""
    weight_text = format_number(weight)
    if outcome.status is OutcomeStatus.OVER_LIMIT:
        top = format_number(outcome.max_limit) if outcome.max_limit is not None else "0"
        return f"Weight ({weight_text}kg) exceeds {top}kg limit"
    if outcome.status is OutcomeStatus.MISSING_RATE:
        return "Rate is blank/missing for this bracket."

    label = "Unknown"
    if outcome.bracket_index is not None:
        label = f"{range_label(outcome.bracket_index, limits)}kg"
    return f"{model_name} | {basis_label} ({weight_text}kg) | [Bracket: {label}]"


class QuoteService:
    """Resolve the table and route for a quote request and price it."""

    def __init__(self, db: Session):
        self.db = db
        self.tables = RateTableService(db)
        self.route_repo = RouteRepository(db)
        self.bracket_repo = BracketScheduleRepository(db)

    def _resolve_table(self, request: QuoteRequest) -> RateTable:
        if request.table_id is None:
            return self.tables.get_active_table(request.client_id, request.pricing_model)
        table = self.tables.get_table(request.table_id)
        if table.client_id != request.client_id or table.pricing_model != request.pricing_model.value:
            raise ValueError(f"Rate table {request.table_id} not found for this client and model")
        return table

    def quote(self, request: QuoteRequest) -> dict[str, Any]:
        weight = compute_chargeable_weight(
            request.charge_basis,
            weight=request.weight,
            length=request.length,
            width=request.width,
            height=request.height,
            divisor=request.volumetric_divisor,
        )
        chargeable = weight.value
        if chargeable <= 0:
            raise ValueError("Please enter valid weight/dimensions")

        table = self._resolve_table(request)
        route = self.route_repo.find_first(table.id, request.origin, request.destination)  # type: ignore[arg-type]
        if route is None:
            raise RouteNotFoundError(f"No configured rate for this route in table: {table.name}")

        limits = self.bracket_repo.get_limits()
        outcome = price(request.pricing_model, chargeable, route.rates or [], limits)  # type: ignore[arg-type]

        bracket_label = None
        if outcome.bracket_index is not None:
            bracket_label = f"{range_label(outcome.bracket_index, limits)}kg"

        return {
            "status": outcome.status,
            "amount": outcome.amount,
            "display_amount": (
                display_amount(outcome.amount) if outcome.amount is not None else None
            ),
            "currency": settings.CURRENCY_LABEL,
            "pricing_model": request.pricing_model,
            "table_id": table.id,
            "route_id": route.id,
            "charge_basis": weight.basis,
            "chargeable_weight": chargeable,
            "actual_weight": weight.actual,
            "volumetric_weight": weight.volumetric,
            "cbm": weight.cbm,
            "bracket_label": bracket_label,
            "message": describe_outcome(
                outcome, request.pricing_model.value, weight.basis_label, chargeable, limits
            ),
        }
