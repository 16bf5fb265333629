"""Schema building and database adapters."""

from .column import Column
from .engine import (
    create_database_engine,
    create_engine_from_settings,
    setup_database_url,
)
from .implementations import SQLiteAdapter, SQLiteSchemaBuilder
from .index import Index
from .interfaces import Adapter, SchemaBuilder
from .table import Table

__all__ = [
    "Adapter",
    "Column",
    "Index",
    "SchemaBuilder",
    "SQLiteAdapter",
    "SQLiteSchemaBuilder",
    "Table",
    "create_database_engine",
    "create_engine_from_settings",
    "setup_database_url",
]
