"""Common type definitions for tablekit."""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, TypeAlias

OptionsType: TypeAlias = Mapping[str, Any]
IndexColumnsType: TypeAlias = str | Sequence[str]


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class ColumnType(str, Enum):
    """Semantic column types known to the toolkit.

    Adapters advertise the subset (or superset) they actually support through
    ``Adapter.get_column_types()``; this enum only names the common vocabulary.
    """

    PRIMARY_KEY = "primary_key"
    STRING = "string"
    TEXT = "text"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    TIME = "time"
    DATE = "date"
    BINARY = "binary"
    BOOLEAN = "boolean"
