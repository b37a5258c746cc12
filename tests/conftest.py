"""Shared pytest fixtures for nulluuid tests."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Generator

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from nulluuid.infrastructure.database.engine import init_database

SAMPLE = "12345678-abcd-1234-abcd-0123456789ab"


@pytest.fixture
def sample_uuid() -> uuid.UUID:
    return uuid.UUID(SAMPLE)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine() -> Generator[Engine]:
    """In-memory SQLite engine with all tables created."""
    engine = init_database()
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and package logger state after each test.

    The CLI reconfigures logging on every invocation.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("nulluuid")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NULLUUID_CONFIG", raising=False)
