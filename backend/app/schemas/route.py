from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class RouteCreate(BaseModel):
    origin: str = Field(default="", max_length=255)
    destination: str = Field(default="", max_length=255)
    rates: list[Decimal | None] = Field(default_factory=list)


class RouteUpdate(BaseModel):
    origin: str | None = Field(default=None, max_length=255)
    destination: str | None = Field(default=None, max_length=255)
    rates: list[Decimal | None] | None = None


class RouteResponse(BaseModel):
    id: UUID
    rate_table_id: UUID
    position: int
    origin: str
    destination: str
    rates: list[Decimal | None]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class LocationsResponse(BaseModel):
    origins: list[str]
    destinations: list[str]
