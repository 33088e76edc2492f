from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.models.rate_table import DEFAULT_TABLE_NAME, PricingModel
from app.schemas.route import RouteResponse


class RateTableCreate(BaseModel):
    client_id: UUID
    pricing_model: PricingModel
    name: str = Field(default=DEFAULT_TABLE_NAME, min_length=1, max_length=255)


class RateTableUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class RateTableResponse(BaseModel):
    id: UUID
    client_id: UUID
    pricing_model: PricingModel
    name: str
    is_active: bool
    routes: list[RouteResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
