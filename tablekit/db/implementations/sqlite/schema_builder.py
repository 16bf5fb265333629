"""SQLite-specific schema builder implementation."""

from collections.abc import Mapping, Sequence
from typing import Any

from tablekit.db.column import Column
from tablekit.db.index import Index, normalize_columns
from tablekit.db.interfaces.schema_builder import SchemaBuilder
from tablekit.types import ColumnType

# Defaults that must be emitted as SQL keywords rather than string literals
SQL_DEFAULT_KEYWORDS = frozenset({"CURRENT_TIMESTAMP", "CURRENT_DATE", "CURRENT_TIME"})

DEFAULT_STRING_LIMIT = 255

_TYPE_MAP = {
    ColumnType.TEXT.value: "TEXT",
    ColumnType.INTEGER.value: "INTEGER",
    ColumnType.FLOAT.value: "FLOAT",
    ColumnType.DATETIME.value: "DATETIME",
    ColumnType.TIMESTAMP.value: "DATETIME",
    ColumnType.TIME.value: "TIME",
    ColumnType.DATE.value: "DATE",
    ColumnType.BINARY.value: "BLOB",
    ColumnType.BOOLEAN.value: "BOOLEAN",
}


def quote(identifier: str) -> str:
    """Quote an SQLite identifier."""
    return '"' + identifier.replace('"', '""') + '"'


class SQLiteSchemaBuilder(SchemaBuilder):
    """SQLite-specific schema builder."""

    def implicit_id_column(
        self, columns: Sequence[Column], options: Mapping[str, Any]
    ) -> str | None:
        """Name of the auto-increment key CREATE TABLE adds, if any."""
        id_column = options.get("id", "id")
        if not id_column or any(column.is_identity() for column in columns):
            return None
        return "id" if id_column is True else str(id_column)

    def column_type_sql(self, column: Column) -> str:
        """Map a semantic column type to its SQLite declaration.

        Raises:
            ValueError: If the type has no SQLite mapping
        """
        if column.is_identity():
            return "INTEGER PRIMARY KEY AUTOINCREMENT"

        if column.type == ColumnType.STRING.value:
            return f"VARCHAR({column.limit or DEFAULT_STRING_LIMIT})"

        if column.type == ColumnType.DECIMAL.value:
            if column.precision is not None and column.scale is not None:
                return f"DECIMAL({column.precision}, {column.scale})"
            if column.precision is not None:
                return f"DECIMAL({column.precision})"
            return "DECIMAL"

        try:
            return _TYPE_MAP[column.type]  # type: ignore[index]
        except KeyError:
            raise ValueError(f"No SQLite mapping for column type: {column.type}")

    def default_sql(self, value: Any) -> str:
        """Render a literal default value."""
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, int | float):
            return str(value)
        text = str(value)
        if text.upper() in SQL_DEFAULT_KEYWORDS:
            return text.upper()
        return "'" + text.replace("'", "''") + "'"

    def column_definition_sql(self, column: Column) -> str:
        """Generate the inline definition of a column for SQLite."""
        col_def = f"{quote(column.name)} {self.column_type_sql(column)}"

        if column.is_identity():
            return col_def

        if not column.nullable:
            col_def += " NOT NULL"

        if column.default is not None:
            col_def += f" DEFAULT {self.default_sql(column.default)}"

        return col_def

    def create_table_sql(
        self,
        table_name: str,
        columns: Sequence[Column],
        options: Mapping[str, Any],
    ) -> str:
        """Generate CREATE TABLE SQL for SQLite.

        Table options:
            id: name of an implicit auto-increment primary key column
                (default ``"id"``); ``False`` disables it
            primary_key: column name(s) of the primary key when ``id`` is off
        """
        column_defs: list[str] = []

        id_column = self.implicit_id_column(columns, options)
        if id_column:
            column_defs.append(f"{quote(id_column)} INTEGER PRIMARY KEY AUTOINCREMENT")

        column_defs.extend(self.column_definition_sql(column) for column in columns)

        primary_key = options.get("primary_key")
        has_identity = any(column.is_identity() for column in columns)
        if not options.get("id", "id") and primary_key and not has_identity:
            key_sql = ", ".join(quote(name) for name in normalize_columns(primary_key))
            column_defs.append(f"PRIMARY KEY ({key_sql})")

        return f"CREATE TABLE {quote(table_name)} ({', '.join(column_defs)})"

    def create_index_sql(self, table_name: str, index: Index) -> str:
        """Generate CREATE INDEX SQL for SQLite."""
        unique = "UNIQUE " if index.unique else ""
        columns_sql = ", ".join(quote(name) for name in index.columns)
        return (
            f"CREATE {unique}INDEX {quote(self.index_name(table_name, index))} "
            f"ON {quote(table_name)} ({columns_sql})"
        )

    def drop_table_sql(self, table_name: str) -> str:
        return f"DROP TABLE {quote(table_name)}"

    def rename_table_sql(self, table_name: str, new_name: str) -> str:
        return f"ALTER TABLE {quote(table_name)} RENAME TO {quote(new_name)}"

    def drop_index_sql(self, index_name: str) -> str:
        return f"DROP INDEX {quote(index_name)}"

    def add_column_sql(self, table_name: str, column: Column) -> str:
        """Generate ALTER TABLE ADD COLUMN SQL for SQLite."""
        return (
            f"ALTER TABLE {quote(table_name)} "
            f"ADD COLUMN {self.column_definition_sql(column)}"
        )

    def drop_column_sql(self, table_name: str, column_name: str) -> str:
        return f"ALTER TABLE {quote(table_name)} DROP COLUMN {quote(column_name)}"

    def rename_column_sql(self, table_name: str, old_name: str, new_name: str) -> str:
        return (
            f"ALTER TABLE {quote(table_name)} "
            f"RENAME COLUMN {quote(old_name)} TO {quote(new_name)}"
        )
