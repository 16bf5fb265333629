"""Database implementations package."""

from .sqlite import SQLiteAdapter, SQLiteSchemaBuilder

__all__ = [
    "SQLiteAdapter",
    "SQLiteSchemaBuilder",
]
