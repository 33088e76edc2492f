from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from app.models.rate_table import PricingModel
from app.services.chargeable_weight import ChargeBasis
from app.services.pricing_models.factory import OutcomeStatus


class QuoteRequest(BaseModel):
    client_id: UUID
    pricing_model: PricingModel
    table_id: UUID | None = None
    origin: str
    destination: str
    weight: Decimal | None = Field(default=None, ge=0)
    length: Decimal | None = Field(default=None, ge=0)
    width: Decimal | None = Field(default=None, ge=0)
    height: Decimal | None = Field(default=None, ge=0)
    volumetric_divisor: Decimal | None = None
    charge_basis: ChargeBasis = ChargeBasis.ACTUAL


class QuoteResponse(BaseModel):
    status: OutcomeStatus
    amount: Decimal | None = None
    display_amount: str | None = None
    currency: str
    pricing_model: PricingModel
    table_id: UUID
    route_id: UUID
    charge_basis: ChargeBasis
    chargeable_weight: Decimal
    actual_weight: Decimal
    volumetric_weight: Decimal
    cbm: Decimal
    bracket_label: str | None = None
    message: str
