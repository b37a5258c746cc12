"""SQLAlchemy binding for NullUUID via SQLAlchemy Core."""

from nulluuid.infrastructure.database.engine import create_db_engine, init_database
from nulluuid.infrastructure.database.schema import links, metadata
from nulluuid.infrastructure.database.types import NullUUIDType

__all__ = [
    "NullUUIDType",
    "create_db_engine",
    "init_database",
    "links",
    "metadata",
]
