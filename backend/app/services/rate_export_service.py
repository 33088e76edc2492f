"""CSV export of a single rate table and JSON export/import of the whole matrix."""

import csv
import io
import logging
import re
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.models.client import Client
from app.models.rate_table import PricingModel, RateTable
from app.models.route import Route
from app.models.shared import decode_decimal_list
from app.repositories.bracket_schedule_repository import BracketScheduleRepository
from app.repositories.client_repository import ClientRepository
from app.repositories.rate_table_repository import RateTableRepository
from app.repositories.route_repository import RouteRepository
from app.schemas.bracket import BracketLimitsUpdate
from app.schemas.client import ClientCreate
from app.schemas.rate_export import (
    EXPORT_APP_VERSION,
    ClientExport,
    MatrixExport,
    MatrixImportResult,
    RateTableExport,
    RouteExport,
    read_app_version,
)
from app.schemas.route import RouteCreate
from app.services.bracket_service import BracketService, format_number
from app.services.pricing_models.brackets import bracket_range

logger = logging.getLogger(__name__)

OLDER_FORMAT_WARNING = "Older format detected. Please check column limits."

_UNSAFE_NAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def safe_file_name(name: str) -> str:
    return _UNSAFE_NAME_CHARS.sub("_", name).lower()


def csv_headers(limits: list[Decimal]) -> list[str]:
    headers = ["Origin", "Destination"]
    for index in range(len(limits)):
        start, end = bracket_range(index, limits)
        headers.append(f"Rate_{format_number(start)}_{format_number(end)}")
    return headers


class RateExportService:
    """Service for moving rate tables in and out of the service."""

    def __init__(self, db: Session):
        self.db = db
        self.bracket_repo = BracketScheduleRepository(db)
        self.client_repo = ClientRepository(db)
        self.table_repo = RateTableRepository(db)
        self.route_repo = RouteRepository(db)

    def export_table_csv(self, table_id: UUID) -> tuple[str, str]:
        """Return ``(filename, csv_content)`` for one rate table."""
        table = self.table_repo.get_by_id(table_id)
        if not table:
            raise ValueError(f"Rate table {table_id} not found")

        limits = self.bracket_repo.get_limits()
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(csv_headers(limits))
        for route in self.route_repo.get_by_table(table_id):
            rates = decode_decimal_list(route.rates)  # type: ignore[arg-type]
            writer.writerow(
                [route.origin, route.destination]
                + ["" if rate is None else format_number(rate) for rate in rates]
            )

        filename = f"{table.pricing_model}_{safe_file_name(str(table.name))}.csv"
        return filename, output.getvalue()

    def export_matrix(self) -> MatrixExport:
        clients = []
        for client in self.db.query(Client).order_by(Client.name).all():
            tables = []
            for table in self.table_repo.get_all(client_id=client.id, limit=10_000):  # type: ignore[arg-type]
                routes = [
                    RouteExport(
                        origin=str(route.origin),
                        destination=str(route.destination),
                        rates=decode_decimal_list(route.rates),  # type: ignore[arg-type]
                    )
                    for route in self.route_repo.get_by_table(table.id)  # type: ignore[arg-type]
                ]
                tables.append(
                    RateTableExport(
                        pricing_model=PricingModel(table.pricing_model),
                        name=str(table.name),
                        is_active=bool(table.is_active),
                        routes=routes,
                    )
                )
            clients.append(
                ClientExport(name=str(client.name), description=client.description, tables=tables)  # type: ignore[arg-type]
            )
        return MatrixExport(limits=self.bracket_repo.get_limits(), clients=clients)

    def import_matrix(self, payload: dict[str, Any]) -> MatrixImportResult:
        """Load a full-matrix document.

        A current-format document replaces the limits and every client. Any
        other document only contributes its ``limits`` when it has them.
        """
        version = read_app_version(payload)
        if version != EXPORT_APP_VERSION:
            return self._import_limits_only(payload, version)

        try:
            document = MatrixExport.model_validate(payload)
        except ValidationError as e:
            raise ValueError(f"Invalid matrix document: {e.error_count()} validation errors") from e
        names = [client.name for client in document.clients]
        if len(names) != len(set(names)):
            raise ValueError("Client names must be unique in a matrix document")

        try:
            result = self._replace_all(document)
        except Exception:
            self.db.rollback()
            logger.exception("Failed to import rate matrix")
            raise
        logger.info(
            "Imported %d clients, %d tables, %d routes",
            result.clients_imported,
            result.tables_imported,
            result.routes_imported,
        )
        return result

    def _import_limits_only(self, payload: dict[str, Any], version: str | None) -> MatrixImportResult:
        logger.warning("Rate matrix import with app_version %r, only limits are read", version)
        if payload.get("limits") is not None:
            try:
                update = BracketLimitsUpdate.model_validate({"limits": payload["limits"]})
            except ValidationError:
                raise ValueError("Invalid bracket limits in matrix document") from None
            BracketService(self.db).replace_limits(update.limits)
        return MatrixImportResult(
            app_version=version,
            limits=self.bracket_repo.get_limits(),
            clients_imported=0,
            tables_imported=0,
            routes_imported=0,
            warning=OLDER_FORMAT_WARNING,
        )

    def _replace_all(self, document: MatrixExport) -> MatrixImportResult:
        self.bracket_repo.get()
        self.db.query(Route).delete()
        self.db.query(RateTable).delete()
        self.db.query(Client).delete()
        self.bracket_repo.set_limits(document.limits, commit=False)

        width = len(document.limits)
        tables_imported = 0
        routes_imported = 0
        for client_data in document.clients:
            client = self.client_repo.create(
                ClientCreate(name=client_data.name, description=client_data.description),
                commit=False,
            )
            for table_data in client_data.tables:
                table = self.table_repo.create(
                    client.id,  # type: ignore[arg-type]
                    table_data.pricing_model,
                    table_data.name,
                    commit=False,
                )
                if table_data.is_active:
                    self.table_repo.set_active(table, commit=False)
                tables_imported += 1
                for route_data in table_data.routes:
                    self.route_repo.create(
                        table.id,  # type: ignore[arg-type]
                        RouteCreate(**route_data.model_dump()),
                        width,
                        commit=False,
                    )
                    routes_imported += 1

        self.db.commit()
        return MatrixImportResult(
            app_version=EXPORT_APP_VERSION,
            limits=self.bracket_repo.get_limits(),
            clients_imported=len(document.clients),
            tables_imported=tables_imported,
            routes_imported=routes_imported,
        )
