from sqlalchemy import Column, DateTime, Integer, func
from sqlalchemy.types import JSON

from app.core.database import Base

# The bracket limits are shared by every client, model and table.
SCHEDULE_ID = 1


class BracketSchedule(Base):
    __tablename__ = "bracket_schedules"

    id = Column(Integer, primary_key=True, default=SCHEDULE_ID)
    limits = Column(JSON, nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
