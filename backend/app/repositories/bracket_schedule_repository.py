from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.bracket_schedule import SCHEDULE_ID, BracketSchedule
from app.models.shared import decode_decimal_list, encode_decimal_list


class BracketScheduleRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self) -> BracketSchedule:
        """Return the shared schedule, seeding the default limits on first use.

        A freshly seeded schedule is only flushed; the caller's commit persists it.
        """
        schedule = self.db.query(BracketSchedule).filter(BracketSchedule.id == SCHEDULE_ID).first()
        if schedule is None:
            defaults = [Decimal(str(limit)) for limit in settings.DEFAULT_BRACKET_LIMITS]
            schedule = BracketSchedule(id=SCHEDULE_ID, limits=encode_decimal_list(defaults))  # type: ignore[arg-type]
            self.db.add(schedule)
            self.db.flush()
            self.db.refresh(schedule)
        return schedule

    def get_limits(self) -> list[Decimal]:
        return [limit for limit in decode_decimal_list(self.get().limits) if limit is not None]  # type: ignore[arg-type]

    def set_limits(self, limits: list[Decimal], commit: bool = True) -> BracketSchedule:
        schedule = self.get()
        schedule.limits = encode_decimal_list(list(limits))  # type: ignore[arg-type,assignment]
        if commit:
            self.db.commit()
            self.db.refresh(schedule)
        else:
            self.db.flush()
        return schedule
