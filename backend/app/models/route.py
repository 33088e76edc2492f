from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.types import JSON

from app.core.database import Base
from app.models.shared import UUIDType, generate_uuid


class Route(Base):
    """One origin/destination row of a rate table.

    ``rates`` is aligned with the shared bracket limits; each entry is a
    decimal string or null when the cell is unset.
    """

    __tablename__ = "routes"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    rate_table_id = Column(
        UUIDType, ForeignKey("rate_tables.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position = Column(Integer, nullable=False, default=0)
    origin = Column(String(255), nullable=False, default="")
    destination = Column(String(255), nullable=False, default="")
    rates = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
