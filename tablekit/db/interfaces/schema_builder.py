"""Abstract schema builder interface for different SQL backends."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from tablekit.db.column import Column
from tablekit.db.index import Index


class SchemaBuilder(ABC):
    """Abstract DDL generator for different SQL backends."""

    @abstractmethod
    def column_definition_sql(self, column: Column) -> str:
        """Generate the inline definition of a column.

        Args:
            column: Column definition

        Returns:
            Column definition fragment (name, type and constraints)
        """
        pass

    @abstractmethod
    def create_table_sql(
        self,
        table_name: str,
        columns: Sequence[Column],
        options: Mapping[str, Any],
    ) -> str:
        """Generate CREATE TABLE SQL.

        Args:
            table_name: Name of the table
            columns: Column definitions in creation order
            options: Table-level creation options

        Returns:
            CREATE TABLE SQL statement
        """
        pass

    @abstractmethod
    def create_index_sql(self, table_name: str, index: Index) -> str:
        """Generate CREATE INDEX SQL.

        Args:
            table_name: Name of the table
            index: Index definition

        Returns:
            CREATE INDEX SQL statement
        """
        pass

    @abstractmethod
    def drop_table_sql(self, table_name: str) -> str:
        """Generate DROP TABLE SQL."""
        pass

    @abstractmethod
    def rename_table_sql(self, table_name: str, new_name: str) -> str:
        """Generate table rename SQL."""
        pass

    @abstractmethod
    def drop_index_sql(self, index_name: str) -> str:
        """Generate DROP INDEX SQL."""
        pass

    @abstractmethod
    def add_column_sql(self, table_name: str, column: Column) -> str:
        """Generate ALTER TABLE ADD COLUMN SQL.

        Args:
            table_name: Name of the table
            column: Column definition to add

        Returns:
            ALTER TABLE SQL statement
        """
        pass

    @abstractmethod
    def drop_column_sql(self, table_name: str, column_name: str) -> str:
        """Generate ALTER TABLE DROP COLUMN SQL."""
        pass

    @abstractmethod
    def rename_column_sql(self, table_name: str, old_name: str, new_name: str) -> str:
        """Generate column rename SQL."""
        pass

    def index_name(self, table_name: str, index: Index) -> str:
        """Name of an index: explicit name or one derived from its columns."""
        if index.name:
            return index.name
        return "_".join(["idx", table_name, *index.columns])
