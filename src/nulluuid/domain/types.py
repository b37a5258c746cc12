"""Codec names shared by the service, CLI, and config layers."""

from __future__ import annotations

from enum import StrEnum


class Encoding(StrEnum):
    """The four boundaries a NullUUID crosses."""

    JSON = "json"
    TEXT = "text"
    BINARY = "binary"
    DRIVER = "driver"
