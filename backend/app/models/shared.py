"""Shared model utilities used across all models."""

import uuid
from decimal import Decimal
from typing import Any

from sqlalchemy import String, TypeDecorator
from sqlalchemy.engine import Dialect


class UUIDType(TypeDecorator[uuid.UUID]):
    """Platform-independent UUID type.

    Uses String(36) for SQLite, native UUID for PostgreSQL.
    """

    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return value
        if isinstance(value, uuid.UUID):
            return str(value)
        return str(uuid.UUID(value))

    def process_result_value(self, value: Any, dialect: Dialect) -> uuid.UUID | None:
        if value is None:
            return value
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)


def generate_uuid() -> uuid.UUID:
    """Generate a new UUID."""
    return uuid.uuid4()


def encode_decimal_list(values: list[Decimal | None]) -> list[str | None]:
    """Serialize decimals as strings so JSON columns keep exact values."""
    return [None if v is None else str(v) for v in values]


def decode_decimal_list(values: list[Any] | None) -> list[Decimal | None]:
    return [None if v is None else Decimal(str(v)) for v in values or []]
