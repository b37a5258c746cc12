"""Engine setup for the NullUUID binding.

SQLAlchemy Core (not ORM) is enough: the only job here is to carry
values through bind parameters and result rows.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from nulluuid.infrastructure.database.schema import metadata

MEMORY_URL = "sqlite://"


def create_db_engine(url: str = MEMORY_URL) -> Engine:
    """Create an engine; SQLite connections get foreign keys enabled."""
    engine = create_engine(url, echo=False)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_database(url: str = MEMORY_URL) -> Engine:
    """Create an engine and all tables from :data:`schema.metadata`.

    Idempotent: safe to call against an existing database.
    """
    engine = create_db_engine(url)
    metadata.create_all(engine)
    return engine
