from collections.abc import Sequence
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.route import Route
from app.models.shared import decode_decimal_list, encode_decimal_list
from app.schemas.route import RouteCreate, RouteUpdate


def fit_rates(rates: Sequence[Any], width: int) -> list[Decimal | None]:
    """Pad with unset cells or truncate so a rate vector has ``width`` entries."""
    fitted = decode_decimal_list(list(rates)[:width])
    fitted.extend([None] * (width - len(fitted)))
    return fitted


class RouteRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_table(self, table_id: UUID) -> list[Route]:
        return (
            self.db.query(Route)
            .filter(Route.rate_table_id == table_id)
            .order_by(Route.position, Route.created_at)
            .all()
        )

    def get_by_id(self, route_id: UUID, table_id: UUID | None = None) -> Route | None:
        query = self.db.query(Route).filter(Route.id == route_id)
        if table_id is not None:
            query = query.filter(Route.rate_table_id == table_id)
        return query.first()

    def count_for_table(self, table_id: UUID) -> int:
        return (
            self.db.query(func.count(Route.id)).filter(Route.rate_table_id == table_id).scalar()
            or 0
        )

    def find_first(self, table_id: UUID, origin: str, destination: str) -> Route | None:
        """Return the first route by position; duplicates resolve to the earliest row."""
        return (
            self.db.query(Route)
            .filter(
                Route.rate_table_id == table_id,
                Route.origin == origin,
                Route.destination == destination,
            )
            .order_by(Route.position, Route.created_at)
            .first()
        )

    def _next_position(self, table_id: UUID) -> int:
        current = (
            self.db.query(func.max(Route.position)).filter(Route.rate_table_id == table_id).scalar()
        )
        return 0 if current is None else current + 1

    def create(
        self, table_id: UUID, data: RouteCreate, width: int, commit: bool = True
    ) -> Route:
        route = Route(
            rate_table_id=table_id,
            position=self._next_position(table_id),
            origin=data.origin,
            destination=data.destination,
            rates=encode_decimal_list(fit_rates(data.rates, width)),
        )
        self.db.add(route)
        if commit:
            self.db.commit()
            self.db.refresh(route)
        else:
            self.db.flush()
        return route

    def update(self, route_id: UUID, table_id: UUID, data: RouteUpdate, width: int) -> Route | None:
        route = self.get_by_id(route_id, table_id)
        if not route:
            return None
        update_data = data.model_dump(exclude_unset=True, exclude={"rates"})
        for key, value in update_data.items():
            if value is not None:
                setattr(route, key, value)
        if data.rates is not None:
            route.rates = encode_decimal_list(fit_rates(data.rates, width))  # type: ignore[assignment]
        self.db.commit()
        self.db.refresh(route)
        return route

    def delete(self, route_id: UUID, table_id: UUID) -> bool:
        route = self.get_by_id(route_id, table_id)
        if not route:
            return False
        self.db.delete(route)
        self.db.commit()
        return True

    def resize_all(self, width: int, commit: bool = True) -> int:
        """Pad or truncate every stored rate vector to ``width`` cells."""
        routes = self.db.query(Route).all()
        for route in routes:
            route.rates = encode_decimal_list(fit_rates(route.rates or [], width))  # type: ignore[assignment,arg-type]
        if commit:
            self.db.commit()
        else:
            self.db.flush()
        return len(routes)
