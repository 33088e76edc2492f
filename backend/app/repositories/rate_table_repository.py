from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.rate_table import PricingModel, RateTable
from app.models.route import Route


class RateTableRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(
        self,
        client_id: UUID | None = None,
        pricing_model: PricingModel | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[RateTable]:
        query = self.db.query(RateTable)
        if client_id is not None:
            query = query.filter(RateTable.client_id == client_id)
        if pricing_model is not None:
            query = query.filter(RateTable.pricing_model == pricing_model.value)
        return query.order_by(RateTable.created_at, RateTable.name).offset(skip).limit(limit).all()

    def count(self, client_id: UUID | None = None, pricing_model: PricingModel | None = None) -> int:
        query = self.db.query(func.count(RateTable.id))
        if client_id is not None:
            query = query.filter(RateTable.client_id == client_id)
        if pricing_model is not None:
            query = query.filter(RateTable.pricing_model == pricing_model.value)
        return query.scalar() or 0

    def get_by_id(self, table_id: UUID) -> RateTable | None:
        return self.db.query(RateTable).filter(RateTable.id == table_id).first()

    def get_for_model(self, client_id: UUID, pricing_model: PricingModel) -> list[RateTable]:
        return (
            self.db.query(RateTable)
            .filter(
                RateTable.client_id == client_id,
                RateTable.pricing_model == pricing_model.value,
            )
            .order_by(RateTable.created_at, RateTable.name)
            .all()
        )

    def get_active(self, client_id: UUID, pricing_model: PricingModel) -> RateTable | None:
        return (
            self.db.query(RateTable)
            .filter(
                RateTable.client_id == client_id,
                RateTable.pricing_model == pricing_model.value,
                RateTable.is_active.is_(True),
            )
            .first()
        )

    def create(
        self,
        client_id: UUID,
        pricing_model: PricingModel,
        name: str,
        is_active: bool = False,
        commit: bool = True,
    ) -> RateTable:
        table = RateTable(
            client_id=client_id,
            pricing_model=pricing_model.value,
            name=name,
            is_active=is_active,
        )
        self.db.add(table)
        if commit:
            self.db.commit()
            self.db.refresh(table)
        else:
            self.db.flush()
        return table

    def rename(self, table_id: UUID, name: str) -> RateTable | None:
        table = self.get_by_id(table_id)
        if not table:
            return None
        table.name = name  # type: ignore[assignment]
        self.db.commit()
        self.db.refresh(table)
        return table

    def set_active(self, table: RateTable, commit: bool = True) -> RateTable:
        """Make a table the only active one of its client and pricing model."""
        self.db.query(RateTable).filter(
            RateTable.client_id == table.client_id,
            RateTable.pricing_model == table.pricing_model,
            RateTable.id != table.id,
        ).update({RateTable.is_active: False}, synchronize_session="fetch")
        table.is_active = True  # type: ignore[assignment]
        if commit:
            self.db.commit()
            self.db.refresh(table)
        else:
            self.db.flush()
        return table

    def delete(self, table_id: UUID, commit: bool = True) -> bool:
        table = self.get_by_id(table_id)
        if not table:
            return False
        self.db.query(Route).filter(Route.rate_table_id == table_id).delete()
        self.db.delete(table)
        if commit:
            self.db.commit()
        else:
            self.db.flush()
        return True
