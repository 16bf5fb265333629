"""In-memory schema-change builder for database migrations."""

from .config import Settings, load_settings, settings
from .db import Adapter, Column, Index, SQLiteAdapter, Table
from .exceptions import (
    AdapterNotConfiguredError,
    InvalidColumnTypeError,
    SchemaObjectNotFoundError,
    TableError,
)
from .log import (
    get_logger,
    setup_logging,
    setup_test_logging,
)
from .types import ColumnType, Environment

__all__ = [
    "Adapter",
    "AdapterNotConfiguredError",
    "Column",
    "ColumnType",
    "Environment",
    "Index",
    "InvalidColumnTypeError",
    "SQLiteAdapter",
    "SchemaObjectNotFoundError",
    "Settings",
    "Table",
    "TableError",
    "get_logger",
    "load_settings",
    "settings",
    "setup_logging",
    "setup_test_logging",
]
