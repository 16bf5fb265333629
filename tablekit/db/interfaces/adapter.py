"""Abstract database adapter interface consumed by Table."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from tablekit.db.column import Column
from tablekit.db.index import Index
from tablekit.types import IndexColumnsType, OptionsType

if TYPE_CHECKING:
    from tablekit.db.table import Table


class Adapter(ABC):
    """Executes schema operations and answers introspection queries.

    Every call is synchronous and acts on one table at a time. Errors raised
    by implementations are propagated to the caller untouched.
    """

    @abstractmethod
    def has_table(self, table_name: str) -> bool:
        """Check whether a table exists.

        Args:
            table_name: Name of the table

        Returns:
            True if the table exists
        """
        pass

    @abstractmethod
    def drop_table(self, table_name: str) -> None:
        """Drop a table.

        Args:
            table_name: Name of the table to drop
        """
        pass

    @abstractmethod
    def rename_table(self, table_name: str, new_name: str) -> None:
        """Rename a table.

        Args:
            table_name: Current table name
            new_name: New table name
        """
        pass

    @abstractmethod
    def get_column_types(self) -> set[str]:
        """Get the column types this adapter supports.

        Returns:
            Set of semantic column type identifiers
        """
        pass

    @abstractmethod
    def has_column(
        self, table_name: str, column_name: str, options: OptionsType | None = None
    ) -> bool:
        """Check whether a column exists.

        Args:
            table_name: Name of the table
            column_name: Name of the column
            options: Adapter-specific lookup options

        Returns:
            True if the column exists
        """
        pass

    @abstractmethod
    def add_column(self, table: "Table", column: Column) -> None:
        """Add a column to an existing table.

        Args:
            table: Table being altered (read for name and options)
            column: Column to add
        """
        pass

    @abstractmethod
    def drop_column(self, table_name: str, column_name: str) -> None:
        """Drop a column.

        Args:
            table_name: Name of the table
            column_name: Name of the column to drop
        """
        pass

    @abstractmethod
    def rename_column(self, table_name: str, old_name: str, new_name: str) -> None:
        """Rename a column.

        Args:
            table_name: Name of the table
            old_name: Current column name
            new_name: New column name
        """
        pass

    @abstractmethod
    def change_column(
        self, table_name: str, column_name: str, new_column: Column
    ) -> None:
        """Change the definition of a column.

        Args:
            table_name: Name of the table
            column_name: Name of the column being changed
            new_column: Replacement column definition (may carry a new name)
        """
        pass

    @abstractmethod
    def has_index(
        self,
        table_name: str,
        columns: IndexColumnsType,
        options: OptionsType | None = None,
    ) -> bool:
        """Check whether an index exists.

        Args:
            table_name: Name of the table
            columns: Column name(s) the index covers
            options: Lookup options such as ``name``

        Returns:
            True if a matching index exists
        """
        pass

    @abstractmethod
    def add_index(self, table: "Table", index: Index) -> None:
        """Add an index to an existing table.

        Args:
            table: Table being altered
            index: Index to add
        """
        pass

    @abstractmethod
    def drop_index(
        self,
        table_name: str,
        columns: IndexColumnsType,
        options: OptionsType | None = None,
    ) -> None:
        """Drop an index.

        Args:
            table_name: Name of the table
            columns: Column name(s) the index covers
            options: Lookup options such as ``name``
        """
        pass

    @abstractmethod
    def create_table(self, table: "Table") -> None:
        """Create a table with all of its pending columns and indexes.

        Args:
            table: Table carrying name, options, pending columns and indexes
        """
        pass
