"""Tests for the SQLite adapter against an in-memory database."""

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, OperationalError

from tablekit.db import Column, Table
from tablekit.db.implementations.sqlite import SQLiteAdapter
from tablekit.exceptions import SchemaObjectNotFoundError
from tablekit.types import ColumnType


@pytest.fixture
def users(sqlite_adapter: SQLiteAdapter) -> Table:
    """Create a users table with a unique email index."""
    table = Table("users", adapter=sqlite_adapter)
    table.add_column("email", "string", null=False)
    table.add_column("name", "string", limit=50)
    table.add_index("email", unique=True)
    table.save()
    return table


def _insert_user(engine: Engine, email: str, name: str) -> None:
    with engine.begin() as conn:
        conn.execute(
            text("INSERT INTO users (email, name) VALUES (:email, :name)"),
            {"email": email, "name": name},
        )


def test_supported_column_types(sqlite_adapter: SQLiteAdapter) -> None:
    """Test the adapter supports the common vocabulary."""
    assert sqlite_adapter.get_column_types() == {t.value for t in ColumnType}


def test_create_path(users: Table, sqlite_adapter: SQLiteAdapter) -> None:
    """Test saving a new table creates columns and indexes together."""
    assert users.exists()
    assert users.has_column("id")
    assert users.has_column("email")
    assert users.has_column("name")
    assert users.has_index("email")
    assert users.pending_columns == []


def test_unique_index_enforced(users: Table, engine: Engine) -> None:
    """Test the unique index staged at creation is live."""
    _insert_user(engine, "a@example.com", "Ann")

    with pytest.raises(IntegrityError):
        _insert_user(engine, "a@example.com", "Another")


def test_update_path(users: Table) -> None:
    """Test saving an existing table adds columns then indexes."""
    users.add_column("age", "integer", default=0)
    users.add_index(["name", "age"], name="users_name_age")
    users.save()

    assert users.has_column("age")
    assert users.has_index(["name", "age"])
    assert users.has_index("anything", {"name": "users_name_age"})


def test_missing_table_queries(sqlite_adapter: SQLiteAdapter) -> None:
    """Test queries against a missing table answer False."""
    assert not sqlite_adapter.has_table("ghost")
    assert not sqlite_adapter.has_column("ghost", "id")
    assert not sqlite_adapter.has_index("ghost", ["id"])


def test_rename_table(users: Table, sqlite_adapter: SQLiteAdapter) -> None:
    """Test renaming moves the table."""
    users.rename("members")

    assert users.name == "members"
    assert sqlite_adapter.has_table("members")
    assert not sqlite_adapter.has_table("users")


def test_rename_to_existing_table_fails(
    users: Table, sqlite_adapter: SQLiteAdapter
) -> None:
    """Test a rejected rename keeps the local name."""
    Table("members", adapter=sqlite_adapter).save()

    with pytest.raises(OperationalError):
        users.rename("members")

    assert users.name == "users"


def test_drop_table(users: Table) -> None:
    """Test dropping removes the table."""
    users.drop()

    assert not users.exists()


def test_drop_missing_table_propagates(sqlite_adapter: SQLiteAdapter) -> None:
    """Test dropping an unknown table surfaces the database error."""
    with pytest.raises(OperationalError):
        Table("ghost", adapter=sqlite_adapter).drop()


def test_remove_and_rename_column(users: Table) -> None:
    """Test immediate column operations."""
    users.rename_column("name", "full_name")
    assert users.has_column("full_name")
    assert not users.has_column("name")

    users.remove_column("full_name")
    assert not users.has_column("full_name")


def test_change_column_preserves_data_and_indexes(
    users: Table, engine: Engine
) -> None:
    """Test changing a column rebuilds the table without losing rows."""
    _insert_user(engine, "a@example.com", "Ann")

    users.change_column("name", Column(type="text", nullable=False, default="anon"))

    columns = {c["name"]: c for c in inspect(engine).get_columns("users")}
    assert str(columns["name"]["type"]) == "TEXT"
    assert columns["name"]["nullable"] is False
    assert users.has_index("email")
    with engine.connect() as conn:
        rows = conn.execute(text("SELECT id, email, name FROM users")).all()
    assert [tuple(row) for row in rows] == [(1, "a@example.com", "Ann")]
    with pytest.raises(IntegrityError):
        _insert_user(engine, "a@example.com", "Again")


def test_change_column_can_rename(users: Table) -> None:
    """Test a named column spec renames the column and its indexes."""
    users.change_column("email", Column(name="email_address", type="string"))

    assert users.has_column("email_address")
    assert not users.has_column("email")
    assert users.has_index("email_address")


def test_change_missing_column(users: Table) -> None:
    """Test changing an unknown column raises."""
    with pytest.raises(SchemaObjectNotFoundError):
        users.change_column("ghost", Column(type="text"))


def test_remove_index(users: Table) -> None:
    """Test removing an index by its columns."""
    users.remove_index("email")

    assert not users.has_index("email")


def test_remove_index_by_name(users: Table) -> None:
    """Test removing an index by explicit name."""
    users.add_index("name", name="users_by_name").save()

    users.remove_index([], {"name": "users_by_name"})

    assert not users.has_index("name")


def test_remove_missing_index(users: Table) -> None:
    """Test removing an unknown index raises."""
    with pytest.raises(SchemaObjectNotFoundError):
        users.remove_index("name")


def test_failed_create_leaves_no_table(sqlite_adapter: SQLiteAdapter) -> None:
    """Test a failing index statement rolls back the whole create."""
    orders = Table("orders", adapter=sqlite_adapter)
    orders.add_column("email", "string")
    orders.add_index("email", name="dup")
    orders.add_index("id", name="dup")

    with pytest.raises(OperationalError):
        orders.save()

    assert not orders.exists()
    assert len(orders.pending_columns) == 1
    assert len(orders.pending_indexes) == 2

    orders.set_pending_indexes(orders.pending_indexes[:1])
    orders.save()

    assert orders.has_column("email")
    assert orders.has_index("email", {"name": "dup"})


def test_failed_change_column_can_be_retried(
    sqlite_adapter: SQLiteAdapter, engine: Engine
) -> None:
    """Test a failed rebuild leaves the table intact and can run again."""
    orders = Table("orders", adapter=sqlite_adapter)
    orders.add_column("email", "string").save()
    with engine.begin() as conn:
        conn.execute(text("INSERT INTO orders (email) VALUES (NULL)"))

    with pytest.raises(IntegrityError):
        orders.change_column("email", Column(type="string", nullable=False))

    assert inspect(engine).get_table_names() == ["orders"]
    columns = {c["name"]: c for c in inspect(engine).get_columns("orders")}
    assert columns["email"]["nullable"] is True

    orders.change_column("email", Column(type="text"))

    assert inspect(engine).get_table_names() == ["orders"]
    columns = {c["name"]: c for c in inspect(engine).get_columns("orders")}
    assert str(columns["email"]["type"]) == "TEXT"
    with engine.connect() as conn:
        rows = conn.execute(text("SELECT id, email FROM orders")).all()
    assert [tuple(row) for row in rows] == [(1, None)]


def test_create_rejects_index_on_unknown_column(
    sqlite_adapter: SQLiteAdapter,
) -> None:
    """Test a misspelled index column fails before the table is created."""
    orders = Table("orders", adapter=sqlite_adapter)
    orders.add_column("email", "string")
    orders.add_index("emial", unique=True)

    with pytest.raises(SchemaObjectNotFoundError, match="emial"):
        orders.save()

    assert not orders.exists()
    assert len(orders.pending_indexes) == 1


def test_update_rejects_index_on_unknown_column(
    users: Table, engine: Engine
) -> None:
    """Test a misspelled index column on an existing table is rejected."""
    users.add_index("nmae", unique=True)

    with pytest.raises(SchemaObjectNotFoundError, match="nmae"):
        users.save()

    index_names = [index["name"] for index in inspect(engine).get_indexes("users")]
    assert index_names == ["idx_users_email"]
    _insert_user(engine, "a@example.com", "Ann")
    _insert_user(engine, "b@example.com", "Ann")
