from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


def check_limits(limits: list[Decimal]) -> list[Decimal]:
    """Reject limits that are not finite positive numbers."""
    if any(not limit.is_finite() or limit <= 0 for limit in limits):
        raise ValueError("Bracket limits must be finite numbers greater than zero")
    return limits


class BracketLimitsUpdate(BaseModel):
    limits: list[Decimal] = Field(..., min_length=1)

    @field_validator("limits")
    @classmethod
    def validate_positive(cls, v: list[Decimal]) -> list[Decimal]:
        return check_limits(v)


class BracketLimitUpdate(BaseModel):
    value: Decimal = Field(..., gt=0, allow_inf_nan=False)


class BracketRange(BaseModel):
    index: int
    start: Decimal
    end: Decimal
    label: str


class BracketScheduleResponse(BaseModel):
    limits: list[Decimal]
    ranges: list[BracketRange] = Field(default_factory=list)
    updated_at: datetime | None = None
