"""Client, rate table and route management."""

import logging
from uuid import UUID

from sqlalchemy.orm import Session

from app.models.client import Client
from app.models.rate_table import DEFAULT_TABLE_NAME, PricingModel, RateTable
from app.models.route import Route
from app.repositories.bracket_schedule_repository import BracketScheduleRepository
from app.repositories.client_repository import ClientRepository
from app.repositories.rate_table_repository import RateTableRepository
from app.repositories.route_repository import RouteRepository
from app.schemas.client import ClientCreate, ClientUpdate
from app.schemas.rate_table import RateTableCreate
from app.schemas.route import RouteCreate, RouteUpdate

logger = logging.getLogger(__name__)


class RateTableService:
    """Service for the client / pricing model / table hierarchy."""

    def __init__(self, db: Session):
        self.db = db
        self.client_repo = ClientRepository(db)
        self.table_repo = RateTableRepository(db)
        self.route_repo = RouteRepository(db)
        self.bracket_repo = BracketScheduleRepository(db)

    def _width(self) -> int:
        return len(self.bracket_repo.get_limits())

    def _seed_table(
        self, client_id: UUID, pricing_model: PricingModel, name: str = DEFAULT_TABLE_NAME
    ) -> RateTable:
        """Create a table with one empty route and make it the active one."""
        table = self.table_repo.create(client_id, pricing_model, name, commit=False)
        self.table_repo.set_active(table, commit=False)
        self.route_repo.create(table.id, RouteCreate(), self._width(), commit=False)  # type: ignore[arg-type]
        return table

    # Clients

    def create_client(self, data: ClientCreate) -> Client:
        """Create a client seeded with a default table for every pricing model."""
        if self.client_repo.name_exists(data.name):
            raise ValueError(f"Client '{data.name}' already exists")
        client = self.client_repo.create(data, commit=False)
        for model in PricingModel:
            self._seed_table(client.id, model)  # type: ignore[arg-type]
        self.db.commit()
        self.db.refresh(client)
        logger.info("Created client %s with %d default tables", client.id, len(PricingModel))
        return client

    def update_client(self, client_id: UUID, data: ClientUpdate) -> Client:
        if data.name is not None and self.client_repo.name_exists(data.name, exclude_id=client_id):
            raise ValueError(f"Client '{data.name}' already exists")
        client = self.client_repo.update(client_id, data)
        if not client:
            raise ValueError(f"Client {client_id} not found")
        return client

    def _get_client(self, client_id: UUID) -> Client:
        client = self.client_repo.get_by_id(client_id)
        if not client:
            raise ValueError(f"Client {client_id} not found")
        return client

    # Rate tables

    def get_table(self, table_id: UUID) -> RateTable:
        table = self.table_repo.get_by_id(table_id)
        if not table:
            raise ValueError(f"Rate table {table_id} not found")
        return table

    def get_active_table(self, client_id: UUID, pricing_model: PricingModel) -> RateTable:
        """Return the active table of a client and model.

        A model without tables gets a default one; a model whose tables are
        all inactive falls back to the first of them.
        """
        self._get_client(client_id)
        active = self.table_repo.get_active(client_id, pricing_model)
        if active:
            return active

        tables = self.table_repo.get_for_model(client_id, pricing_model)
        if tables:
            return self.table_repo.set_active(tables[0])

        table = self._seed_table(client_id, pricing_model)
        self.db.commit()
        self.db.refresh(table)
        return table

    def create_table(self, data: RateTableCreate) -> RateTable:
        """Create a new table for a client and model; it becomes the active one."""
        self._get_client(data.client_id)
        table = self._seed_table(data.client_id, data.pricing_model, data.name)
        self.db.commit()
        self.db.refresh(table)
        logger.info("Created rate table %s (%s)", table.id, data.pricing_model.value)
        return table

    def rename_table(self, table_id: UUID, name: str) -> RateTable:
        if not name.strip():
            raise ValueError("Table name must not be blank")
        table = self.table_repo.rename(table_id, name)
        if not table:
            raise ValueError(f"Rate table {table_id} not found")
        return table

    def activate_table(self, table_id: UUID) -> RateTable:
        return self.table_repo.set_active(self.get_table(table_id))

    def delete_table(self, table_id: UUID) -> None:
        """Delete a table, keeping at least one per client and model."""
        table = self.get_table(table_id)
        model = PricingModel(table.pricing_model)
        siblings = self.table_repo.get_for_model(table.client_id, model)  # type: ignore[arg-type]
        if len(siblings) <= 1:
            raise ValueError("You must have at least one table for this model.")

        was_active = bool(table.is_active)
        self.table_repo.delete(table_id, commit=False)
        if was_active:
            remaining = [t for t in siblings if t.id != table_id]
            self.table_repo.set_active(remaining[0], commit=False)
        self.db.commit()
        logger.info("Deleted rate table %s", table_id)

    # Routes

    def get_routes(self, table_id: UUID) -> list[Route]:
        self.get_table(table_id)
        return self.route_repo.get_by_table(table_id)

    def add_route(self, table_id: UUID, data: RouteCreate | None = None) -> Route:
        self.get_table(table_id)
        return self.route_repo.create(table_id, data or RouteCreate(), self._width())

    def update_route(self, table_id: UUID, route_id: UUID, data: RouteUpdate) -> Route:
        route = self.route_repo.update(route_id, table_id, data, self._width())
        if not route:
            raise ValueError(f"Route {route_id} not found")
        return route

    def delete_route(self, table_id: UUID, route_id: UUID) -> None:
        """Delete a route, keeping at least one row per table."""
        if not self.route_repo.get_by_id(route_id, table_id):
            raise ValueError(f"Route {route_id} not found")
        if self.route_repo.count_for_table(table_id) <= 1:
            raise ValueError("Cannot delete the last remaining row.")
        self.route_repo.delete(route_id, table_id)

    def locations(self, table_id: UUID) -> tuple[list[str], list[str]]:
        """Distinct non-empty origins and destinations in first-seen order."""
        routes = self.get_routes(table_id)
        origins = list(dict.fromkeys(str(r.origin) for r in routes if r.origin))
        destinations = list(dict.fromkeys(str(r.destination) for r in routes if r.destination))
        return origins, destinations
