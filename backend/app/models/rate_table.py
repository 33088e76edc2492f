from enum import Enum

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, func

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid


class PricingModel(str, Enum):
    FIXED = "fixed"  # Weight * bracket rate
    FLAT = "flat"  # Bracket rate as a flat charge
    MIN_FIXED = "minFixed"  # Flat minimum in the first bracket, then fixed
    CUMULATIVE = "cumulative"  # Progressive fill across brackets
    MIN_CUMULATIVE = "minCumulative"  # Progressive fill with a flat first bracket
    MIN_EXCESS = "minExcess"  # Flat base plus per-unit excess
    EXCESS = "excess"  # Per-unit base plus per-unit excess


DEFAULT_TABLE_NAME = "Standard Table"


class RateTable(Base):
    __tablename__ = "rate_tables"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    client_id = Column(
        UUIDType, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    pricing_model = Column(String(30), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
