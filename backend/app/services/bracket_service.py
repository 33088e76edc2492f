"""Shared bracket limits and keeping every rate vector aligned with them."""

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.bracket_schedule import BracketSchedule
from app.repositories.bracket_schedule_repository import BracketScheduleRepository
from app.repositories.route_repository import RouteRepository
from app.services.pricing_models.brackets import bracket_range

logger = logging.getLogger(__name__)


def format_number(value: Decimal) -> str:
    """Render a decimal without exponent or trailing zeros, e.g. ``51`` or ``2.5``."""
    return format(value.normalize(), "f")


def range_label(index: int, limits: list[Decimal]) -> str:
    start, end = bracket_range(index, limits)
    return f"{format_number(start)}-{format_number(end)}"


class BracketService:
    """Service for editing the bracket limits shared by all rate tables."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BracketScheduleRepository(db)
        self.route_repo = RouteRepository(db)

    def get_schedule(self) -> BracketSchedule:
        return self.repo.get()

    def get_limits(self) -> list[Decimal]:
        return self.repo.get_limits()

    def replace_limits(self, limits: list[Decimal]) -> list[Decimal]:
        """Replace all limits and pad or truncate every route to the new width."""
        if any(not limit.is_finite() or limit <= 0 for limit in limits):
            raise ValueError("Bracket limits must be finite numbers greater than zero")
        self.repo.set_limits(limits, commit=False)
        resized = self.route_repo.resize_all(len(limits), commit=False)
        self.db.commit()
        logger.info("Replaced bracket limits with %d brackets, resized %d routes", len(limits), resized)
        return self.get_limits()

    def append_bracket(self) -> list[Decimal]:
        """Add a bracket after the last limit and an unset cell to every route."""
        limits = self.get_limits()
        last = limits[-1] if limits else Decimal(0)
        limits.append(last + Decimal(str(settings.BRACKET_APPEND_STEP)))
        return self.replace_limits(limits)

    def update_limit(self, index: int, value: Decimal) -> list[Decimal]:
        if not value.is_finite() or value <= 0:
            raise ValueError("Bracket limit must be greater than zero")
        limits = self.get_limits()
        if index < 0 or index >= len(limits):
            raise ValueError(f"Bracket {index} not found")
        limits[index] = value
        self.repo.set_limits(limits)
        logger.info("Bracket %d limit set to %s", index, value)
        return limits

    def ranges(self, limits: list[Decimal] | None = None) -> list[dict[str, object]]:
        limits = self.get_limits() if limits is None else limits
        result: list[dict[str, object]] = []
        for index in range(len(limits)):
            start, end = bracket_range(index, limits)
            result.append(
                {"index": index, "start": start, "end": end, "label": range_label(index, limits)}
            )
        return result
