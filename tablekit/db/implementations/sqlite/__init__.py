"""SQLite database implementation package."""

from .adapter import SQLiteAdapter
from .schema_builder import SQLiteSchemaBuilder

__all__ = [
    "SQLiteAdapter",
    "SQLiteSchemaBuilder",
]
