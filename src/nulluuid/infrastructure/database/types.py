"""NullUUIDType: a SQLAlchemy column type that reads and writes NullUUID.

Bind parameters go through :meth:`NullUUID.driver_value` and result rows
through :meth:`NullUUID.scan`, so SQL NULL and an absent NullUUID are the
same thing at the boundary. A NULL column reads back as an absent
NullUUID, never as ``None``.

Uses PostgreSQL's native UUID type when available, otherwise CHAR(36).
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import types
from sqlalchemy.dialects.postgresql import UUID as PostgresUUID
from sqlalchemy.engine.interfaces import Dialect

from nulluuid.domain.nullable import NullUUID


class NullUUIDType(types.TypeDecorator[NullUUID]):
    impl = types.CHAR(36)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> types.TypeEngine[Any]:
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PostgresUUID(as_uuid=False))
        return dialect.type_descriptor(types.CHAR(36))

    def process_bind_param(self, value: Any, dialect: Dialect) -> Any:
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            value = NullUUID.from_uuid(value)
        elif isinstance(value, str):
            value = NullUUID.from_text(value)
        elif isinstance(value, (bytes, bytearray, memoryview)):
            # Same byte shapes scan() accepts: 16 raw bytes, otherwise UUID text.
            value = NullUUID.from_driver(value)
        elif not isinstance(value, NullUUID):
            raise TypeError(f"cannot bind {type(value).__name__} as NullUUID")
        return value.driver_value()

    def process_result_value(self, value: Any, dialect: Dialect) -> NullUUID:
        return NullUUID.from_driver(value)

    def process_literal_param(self, value: Any, dialect: Dialect) -> str:
        bound = self.process_bind_param(value, dialect)
        if bound is None:
            return "NULL"
        return f"'{bound}'"

    @property
    def python_type(self) -> type[NullUUID]:
        return NullUUID
