"""Tests for the database engine factory."""

from pathlib import Path

import pytest
from sqlalchemy import inspect

from tablekit.config import Settings
from tablekit.db import (
    SQLiteAdapter,
    Table,
    create_database_engine,
    create_engine_from_settings,
    setup_database_url,
)
from tablekit.types import Environment


def test_testing_url_is_in_memory() -> None:
    """Test the testing environment uses an in-memory database."""
    assert setup_database_url(Environment.TESTING) == "sqlite:///:memory:"


def test_custom_path_url(tmp_path: Path) -> None:
    """Test a custom path overrides the environment default."""
    db_path = tmp_path / "nested" / "app.db"

    url = setup_database_url(Environment.PRODUCTION, db_path)

    assert url == f"sqlite:///{db_path}"
    assert db_path.parent.exists()


def test_default_paths(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Test per-environment default database files."""
    monkeypatch.chdir(tmp_path)

    assert setup_database_url(Environment.PRODUCTION) == "sqlite:///db/tablekit.db"
    assert setup_database_url(Environment.DEVELOPMENT) == (
        "sqlite:///db/tablekit.dev.db"
    )


def test_engine_drives_adapter(tmp_path: Path) -> None:
    """Test an engine from the factory backs a working adapter."""
    engine = create_database_engine(Environment.DEVELOPMENT, db_path=tmp_path / "t.db")
    table = Table("events", adapter=SQLiteAdapter(engine))

    table.add_column("kind", "string").save()

    assert inspect(engine).has_table("events")
    engine.dispose()


def test_engine_from_settings_prefers_url() -> None:
    """Test an explicit database URL wins over the environment."""
    settings = Settings(environment=Environment.PRODUCTION, database_url="sqlite://")

    engine = create_engine_from_settings(settings)

    assert str(engine.url) == "sqlite://"
    engine.dispose()
