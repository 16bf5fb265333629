"""Table builder that stages schema changes and commits them via an adapter."""

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from tablekit.db.column import Column
from tablekit.db.index import Index, normalize_columns
from tablekit.db.interfaces.adapter import Adapter
from tablekit.exceptions import AdapterNotConfiguredError, InvalidColumnTypeError
from tablekit.log import get_logger
from tablekit.types import IndexColumnsType, OptionsType

logger = get_logger(__name__)


class Table:
    """Mutable representation of one database table and its pending changes.

    Column and index additions are staged and only reach the database on
    ``save()``. Removals, renames and column changes run immediately.
    """

    def __init__(
        self,
        name: str,
        options: OptionsType | None = None,
        adapter: Adapter | None = None,
    ) -> None:
        """Initialize table.

        Args:
            name: Table name
            options: Table creation options, passed verbatim to the adapter
            adapter: Database adapter
        """
        self._name = name
        self.options: dict[str, Any] = dict(options or {})
        self.adapter = adapter
        self._columns: list[Column] = []
        self._indexes: list[Index] = []

    @property
    def name(self) -> str:
        """Current table name."""
        return self._name

    def get_name(self) -> str:
        return self._name

    @property
    def pending_columns(self) -> list[Column]:
        """Columns waiting to be committed, in staging order."""
        return self._columns

    def set_pending_columns(self, columns: Sequence[Column]) -> "Table":
        self._columns = list(columns)
        return self

    @property
    def pending_indexes(self) -> list[Index]:
        """Indexes waiting to be committed, in staging order."""
        return self._indexes

    def set_pending_indexes(self, indexes: Sequence[Index]) -> "Table":
        self._indexes = list(indexes)
        return self

    def _require_adapter(self, operation: str) -> Adapter:
        if self.adapter is None:
            raise AdapterNotConfiguredError(
                f"An adapter must be specified to {operation}."
            )
        return self.adapter

    def exists(self) -> bool:
        """Check whether the table exists in the database."""
        return self._require_adapter("check table existence").has_table(self._name)

    def drop(self) -> None:
        """Drop the table."""
        self._require_adapter("drop a table").drop_table(self._name)
        logger.info(f"Dropped table {self._name}")

    def rename(self, new_name: str) -> "Table":
        """Rename the table; the local name changes only once the adapter succeeds."""
        self._require_adapter("rename a table").rename_table(self._name, new_name)
        logger.info(f"Renamed table {self._name} to {new_name}")
        self._name = new_name
        return self

    def reset(self) -> None:
        """Discard all pending changes without touching the database."""
        self._columns = []
        self._indexes = []

    def add_column(
        self,
        column: str | Column,
        column_type: str | None = None,
        options: OptionsType | None = None,
        **kwargs: Any,
    ) -> "Table":
        """Stage a column for addition.

        Type can be: primary_key, string, text, integer, float, decimal,
        datetime, timestamp, time, date, binary, boolean, or any other type
        the adapter reports.

        Valid options can be: limit, default, null, precision, scale, after,
        identity, comment. Keyword arguments are merged over ``options``.

        Args:
            column: Column name, or a prebuilt Column used as-is
            column_type: Column type when a name is given
            options: Column options when a name is given

        Returns:
            The table, for chaining

        Raises:
            AdapterNotConfiguredError: No adapter is attached
            InvalidColumnTypeError: The adapter does not support the type
        """
        adapter = self._require_adapter("add a column")

        if not isinstance(column, Column):
            column = Column.from_options(
                column, column_type, {**(options or {}), **kwargs}
            )

        supported = adapter.get_column_types()
        if column.type not in supported:
            raise InvalidColumnTypeError(column.type, supported)

        self._columns.append(column)
        logger.debug(f"Staged column {column.name} ({column.type}) on {self._name}")
        return self

    def remove_column(self, column_name: str) -> "Table":
        """Drop a column immediately."""
        self._require_adapter("remove a column").drop_column(self._name, column_name)
        logger.info(f"Removed column {column_name} from {self._name}")
        return self

    def rename_column(self, old_name: str, new_name: str) -> "Table":
        """Rename a column immediately."""
        self._require_adapter("rename a column").rename_column(
            self._name, old_name, new_name
        )
        logger.info(f"Renamed column {old_name} to {new_name} on {self._name}")
        return self

    def change_column(self, column_name: str, new_column: Column) -> "Table":
        """Change a column's definition immediately.

        If ``new_column`` has no name, the name of the column being changed is
        used. The caller's Column is left untouched.
        """
        adapter = self._require_adapter("change a column")

        if not new_column.name:
            new_column = replace(
                new_column, name=column_name, extra=dict(new_column.extra)
            )

        adapter.change_column(self._name, column_name, new_column)
        logger.info(f"Changed column {column_name} on {self._name}")
        return self

    def has_column(self, column_name: str, options: OptionsType | None = None) -> bool:
        """Check whether a column exists."""
        return self._require_adapter("check a column").has_column(
            self._name, column_name, options or {}
        )

    def add_index(
        self,
        columns: IndexColumnsType | Index,
        options: OptionsType | None = None,
        **kwargs: Any,
    ) -> "Table":
        """Stage an index for addition.

        In ``options`` you can specify ``unique`` (bool) or ``name`` (index
        name). Keyword arguments are merged over ``options``.

        Args:
            columns: Column name, sequence of names, or a prebuilt Index

        Returns:
            The table, for chaining
        """
        if isinstance(columns, Index):
            index = columns
        else:
            index = Index.from_options(columns, {**(options or {}), **kwargs})

        self._indexes.append(index)
        logger.debug(f"Staged index on {self._name} ({', '.join(index.columns)})")
        return self

    def remove_index(
        self, columns: IndexColumnsType, options: OptionsType | None = None
    ) -> "Table":
        """Drop an index immediately."""
        self._require_adapter("remove an index").drop_index(
            self._name, normalize_columns(columns), options or {}
        )
        logger.info(f"Removed index on {self._name} ({columns})")
        return self

    def has_index(
        self, columns: IndexColumnsType, options: OptionsType | None = None
    ) -> bool:
        """Check whether an index exists."""
        return self._require_adapter("check an index").has_index(
            self._name, normalize_columns(columns), options or {}
        )

    def save(self) -> None:
        """Commit the pending changes.

        A missing table is created in a single adapter call carrying every
        pending column and index. An existing table gets one add call per
        pending column, then one per pending index, in staging order. A
        failure propagates and leaves the pending changes in place; changes
        already applied are not undone.
        """
        adapter = self._require_adapter("save a table")

        if self.exists():
            logger.info(
                f"Updating table {self._name}: {len(self._columns)} column(s), "
                f"{len(self._indexes)} index(es)"
            )
            for column in self._columns:
                adapter.add_column(self, column)

            for index in self._indexes:
                adapter.add_index(self, index)
        else:
            logger.info(
                f"Creating table {self._name}: {len(self._columns)} column(s), "
                f"{len(self._indexes)} index(es)"
            )
            adapter.create_table(self)

        self.reset()

    def __repr__(self) -> str:
        return (
            f"Table(name={self._name!r}, pending_columns={len(self._columns)}, "
            f"pending_indexes={len(self._indexes)})"
        )
