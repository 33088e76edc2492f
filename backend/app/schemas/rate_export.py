from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.models.rate_table import PricingModel
from app.schemas.bracket import check_limits

EXPORT_APP_VERSION = "ratecard_v3_clients"


class RouteExport(BaseModel):
    origin: str = ""
    destination: str = ""
    rates: list[Decimal | None] = Field(default_factory=list)


class RateTableExport(BaseModel):
    pricing_model: PricingModel
    name: str = Field(..., min_length=1, max_length=255)
    is_active: bool = False
    routes: list[RouteExport] = Field(default_factory=list)


class ClientExport(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    tables: list[RateTableExport] = Field(default_factory=list)


class MatrixExport(BaseModel):
    """Full-matrix document: shared limits plus every client's tables."""

    app_version: str = EXPORT_APP_VERSION
    limits: list[Decimal] = Field(..., min_length=1)
    clients: list[ClientExport] = Field(default_factory=list)

    @field_validator("limits")
    @classmethod
    def validate_limits(cls, v: list[Decimal]) -> list[Decimal]:
        return check_limits(v)


class MatrixImportResult(BaseModel):
    app_version: str | None
    limits: list[Decimal]
    clients_imported: int
    tables_imported: int
    routes_imported: int
    warning: str | None = None


def read_app_version(payload: dict[str, Any]) -> str | None:
    version = payload.get("app_version")
    return version if isinstance(version, str) else None
