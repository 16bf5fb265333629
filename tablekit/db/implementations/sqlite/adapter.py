"""SQLite adapter backed by a SQLAlchemy engine."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import event, inspect, text
from sqlalchemy.engine import Engine

from tablekit.db.column import Column
from tablekit.db.index import Index, normalize_columns
from tablekit.db.interfaces.adapter import Adapter
from tablekit.exceptions import SchemaObjectNotFoundError
from tablekit.log import get_logger
from tablekit.types import ColumnType, IndexColumnsType, OptionsType

from .schema_builder import SQLiteSchemaBuilder, quote

if TYPE_CHECKING:
    from tablekit.db.table import Table

logger = get_logger(__name__)

# Prefix of the scratch table used while rebuilding a table
REBUILD_TABLE_PREFIX = "_tablekit_rebuild_"


def _disable_driver_transactions(dbapi_connection: Any, connection_record: Any) -> None:
    # pysqlite never emits BEGIN before DDL; SQLAlchemy issues it instead
    dbapi_connection.isolation_level = None


def _emit_begin(conn: Any) -> None:
    conn.exec_driver_sql("BEGIN")


def enable_transactional_ddl(engine: Engine) -> None:
    """Make `engine.begin()` blocks wrap DDL in a real SQLite transaction.

    Only connections opened after this call are affected.
    """
    if event.contains(engine, "connect", _disable_driver_transactions):
        return
    event.listen(engine, "connect", _disable_driver_transactions)
    event.listen(engine, "begin", _emit_begin)


class SQLiteAdapter(Adapter):
    """Adapter that applies schema changes to an SQLite database."""

    def __init__(
        self, engine: Engine, schema_builder: SQLiteSchemaBuilder | None = None
    ) -> None:
        """Initialize SQLite adapter.

        Args:
            engine: SQLAlchemy engine bound to an SQLite database
            schema_builder: DDL generator (defaults to SQLiteSchemaBuilder)
        """
        self.engine = engine
        self.schema_builder = schema_builder or SQLiteSchemaBuilder()
        enable_transactional_ddl(engine)

    def _execute(self, *statements: str) -> None:
        """Execute statements in one transaction; any failure rolls all back."""
        with self.engine.begin() as conn:
            for statement in statements:
                logger.debug(f"Executing: {statement}")
                conn.execute(text(statement))

    def _find_index(
        self,
        table_name: str,
        columns: IndexColumnsType,
        options: OptionsType | None,
    ) -> dict[str, Any] | None:
        """Find a reflected index by explicit name or by covered columns."""
        name = (options or {}).get("name")
        columns = normalize_columns(columns)
        for index in inspect(self.engine).get_indexes(table_name):
            if name:
                if index["name"] == name:
                    return dict(index)
            elif list(index["column_names"]) == columns:
                return dict(index)
        return None

    def _check_index_columns(
        self, table_name: str, index: Index, available: Sequence[str]
    ) -> None:
        """Reject indexes on unknown columns.

        SQLite reads a quoted identifier that names no column as a string
        literal, which would index a constant.
        """
        missing = [name for name in index.columns if name not in available]
        if missing:
            raise SchemaObjectNotFoundError(
                f"Index on table {table_name} refers to unknown columns: {missing}"
            )

    def has_table(self, table_name: str) -> bool:
        return inspect(self.engine).has_table(table_name)

    def drop_table(self, table_name: str) -> None:
        self._execute(self.schema_builder.drop_table_sql(table_name))

    def rename_table(self, table_name: str, new_name: str) -> None:
        self._execute(self.schema_builder.rename_table_sql(table_name, new_name))

    def get_column_types(self) -> set[str]:
        return {column_type.value for column_type in ColumnType}

    def has_column(
        self, table_name: str, column_name: str, options: OptionsType | None = None
    ) -> bool:
        if not self.has_table(table_name):
            return False
        columns = inspect(self.engine).get_columns(table_name)
        return any(column["name"] == column_name for column in columns)

    def add_column(self, table: "Table", column: Column) -> None:
        if column.after:
            logger.debug(
                f"SQLite ignores column placement; {column.name} is appended "
                f"instead of following {column.after}"
            )
        self._execute(self.schema_builder.add_column_sql(table.name, column))

    def drop_column(self, table_name: str, column_name: str) -> None:
        self._execute(self.schema_builder.drop_column_sql(table_name, column_name))

    def rename_column(self, table_name: str, old_name: str, new_name: str) -> None:
        self._execute(
            self.schema_builder.rename_column_sql(table_name, old_name, new_name)
        )

    def change_column(
        self, table_name: str, column_name: str, new_column: Column
    ) -> None:
        """Change a column by rebuilding the table.

        SQLite has no ALTER COLUMN, so the table is copied into a temporary
        table with the new definition, swapped in, and its indexes recreated.
        """
        inspector = inspect(self.engine)
        reflected = inspector.get_columns(table_name)
        if not any(column["name"] == column_name for column in reflected):
            raise SchemaObjectNotFoundError(
                f"Column {column_name} not found on table {table_name}"
            )

        primary_key = inspector.get_pk_constraint(table_name)["constrained_columns"]
        indexes = inspector.get_indexes(table_name)
        autoincrement = self._uses_autoincrement(table_name)

        column_defs: list[str] = []
        old_names: list[str] = []
        new_names: list[str] = []
        for column in reflected:
            old_names.append(column["name"])
            if column["name"] == column_name:
                new_names.append(new_column.name)
                column_defs.append(
                    self.schema_builder.column_definition_sql(new_column)
                )
            else:
                new_names.append(column["name"])
                column_defs.append(
                    self._reflected_column_sql(column, primary_key, autoincrement)
                )

        renamed_key = [
            new_column.name if name == column_name else name for name in primary_key
        ]
        if len(primary_key) > 1:
            key_sql = ", ".join(quote(name) for name in renamed_key)
            column_defs.append(f"PRIMARY KEY ({key_sql})")

        tmp_name = f"{REBUILD_TABLE_PREFIX}{table_name}"
        statements = [
            f"DROP TABLE IF EXISTS {quote(tmp_name)}",
            f"CREATE TABLE {quote(tmp_name)} ({', '.join(column_defs)})",
            f"INSERT INTO {quote(tmp_name)} ({', '.join(map(quote, new_names))}) "
            f"SELECT {', '.join(map(quote, old_names))} FROM {quote(table_name)}",
            self.schema_builder.drop_table_sql(table_name),
            self.schema_builder.rename_table_sql(tmp_name, table_name),
        ]
        for index in indexes:
            columns = [
                new_column.name if name == column_name else name
                for name in index["column_names"]
            ]
            statements.append(
                self.schema_builder.create_index_sql(
                    table_name,
                    Index(
                        columns=columns,
                        unique=bool(index["unique"]),
                        name=index["name"],
                    ),
                )
            )

        logger.debug(f"Rebuilding table {table_name} to change column {column_name}")
        self._execute(*statements)

    def _uses_autoincrement(self, table_name: str) -> bool:
        with self.engine.connect() as conn:
            create_sql = conn.execute(
                text(
                    "SELECT sql FROM sqlite_master "
                    "WHERE type = 'table' AND name = :name"
                ),
                {"name": table_name},
            ).scalar()
        return "AUTOINCREMENT" in (create_sql or "").upper()

    def _reflected_column_sql(
        self,
        column: dict[str, Any],
        primary_key: list[str],
        autoincrement: bool,
    ) -> str:
        """Render a reflected column back into a definition fragment."""
        type_sql = column["type"].compile(dialect=self.engine.dialect)
        col_def = f"{quote(column['name'])} {type_sql}"

        if primary_key == [column["name"]]:
            col_def += " PRIMARY KEY"
            if autoincrement and type_sql.upper() == "INTEGER":
                col_def += " AUTOINCREMENT"
            return col_def

        if not column["nullable"]:
            col_def += " NOT NULL"

        if column.get("default") is not None:
            col_def += f" DEFAULT {column['default']}"

        return col_def

    def has_index(
        self,
        table_name: str,
        columns: IndexColumnsType,
        options: OptionsType | None = None,
    ) -> bool:
        if not self.has_table(table_name):
            return False
        return self._find_index(table_name, columns, options) is not None

    def add_index(self, table: "Table", index: Index) -> None:
        columns = inspect(self.engine).get_columns(table.name)
        self._check_index_columns(
            table.name, index, [column["name"] for column in columns]
        )
        self._execute(self.schema_builder.create_index_sql(table.name, index))

    def drop_index(
        self,
        table_name: str,
        columns: IndexColumnsType,
        options: OptionsType | None = None,
    ) -> None:
        index = self._find_index(table_name, columns, options)
        if index is None:
            raise SchemaObjectNotFoundError(
                f"No index on table {table_name} matches {normalize_columns(columns)}"
            )
        self._execute(self.schema_builder.drop_index_sql(index["name"]))

    def create_table(self, table: "Table") -> None:
        """Create the table and its indexes in one transaction."""
        available = [column.name for column in table.pending_columns]
        id_column = self.schema_builder.implicit_id_column(
            table.pending_columns, table.options
        )
        if id_column:
            available.append(id_column)
        for index in table.pending_indexes:
            self._check_index_columns(table.name, index, available)

        statements = [
            self.schema_builder.create_table_sql(
                table.name, table.pending_columns, table.options
            )
        ]
        statements.extend(
            self.schema_builder.create_index_sql(table.name, index)
            for index in table.pending_indexes
        )
        self._execute(*statements)
