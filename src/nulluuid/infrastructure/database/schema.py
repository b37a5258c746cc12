"""SQLAlchemy Core table definitions.

``links`` stores a parent pointer that may be absent, the shape a
nullable UUID column usually takes in practice.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, Table, Text

from nulluuid.infrastructure.database.types import NullUUIDType

metadata = MetaData()

links = Table(
    "links",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("label", Text, nullable=False),
    Column("parent_id", NullUUIDType(), nullable=True),
)
