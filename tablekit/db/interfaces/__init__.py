"""Database interfaces module."""

from .adapter import Adapter
from .schema_builder import SchemaBuilder

__all__ = [
    "Adapter",
    "SchemaBuilder",
]
