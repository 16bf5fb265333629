"""Shared test fixtures for SQLite adapter tests."""

from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from tablekit.db.implementations.sqlite import SQLiteAdapter, SQLiteSchemaBuilder


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create an in-memory SQLite engine."""
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_adapter(engine: Engine) -> SQLiteAdapter:
    """Create an SQLite adapter bound to the in-memory engine."""
    return SQLiteAdapter(engine)


@pytest.fixture
def schema_builder() -> SQLiteSchemaBuilder:
    """Create SQLite schema builder instance."""
    return SQLiteSchemaBuilder()
