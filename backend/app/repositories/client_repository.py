from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.client import Client
from app.models.rate_table import RateTable
from app.models.route import Route
from app.schemas.client import ClientCreate, ClientUpdate


class ClientRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Client]:
        return (
            self.db.query(Client)
            .order_by(Client.name)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count(self) -> int:
        return self.db.query(func.count(Client.id)).scalar() or 0

    def get_by_id(self, client_id: UUID) -> Client | None:
        return self.db.query(Client).filter(Client.id == client_id).first()

    def name_exists(self, name: str, exclude_id: UUID | None = None) -> bool:
        query = self.db.query(Client).filter(Client.name == name)
        if exclude_id is not None:
            query = query.filter(Client.id != exclude_id)
        return query.first() is not None

    def create(self, data: ClientCreate, commit: bool = True) -> Client:
        client = Client(**data.model_dump())
        self.db.add(client)
        if commit:
            self.db.commit()
            self.db.refresh(client)
        else:
            self.db.flush()
        return client

    def update(self, client_id: UUID, data: ClientUpdate) -> Client | None:
        client = self.get_by_id(client_id)
        if not client:
            return None
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(client, key, value)
        self.db.commit()
        self.db.refresh(client)
        return client

    def delete(self, client_id: UUID) -> bool:
        client = self.get_by_id(client_id)
        if not client:
            return False
        table_ids = [
            row.id for row in self.db.query(RateTable.id).filter(RateTable.client_id == client_id)
        ]
        if table_ids:
            self.db.query(Route).filter(Route.rate_table_id.in_(table_ids)).delete(
                synchronize_session=False
            )
            self.db.query(RateTable).filter(RateTable.id.in_(table_ids)).delete(
                synchronize_session=False
            )
        self.db.delete(client)
        self.db.commit()
        return True
