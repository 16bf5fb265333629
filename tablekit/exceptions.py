"""Exceptions raised by the table builder."""


class TableError(Exception):
    """Base exception for table builder errors."""

    pass


class AdapterNotConfiguredError(TableError, RuntimeError):
    """Raised when an operation needs an adapter but none is attached."""

    pass


class SchemaObjectNotFoundError(TableError, LookupError):
    """Raised by adapters when a column or index to act on does not exist."""

    pass


class InvalidColumnTypeError(TableError, ValueError):
    """Raised when a column type is not supported by the adapter."""

    def __init__(self, column_type: str | None, supported: set[str]) -> None:
        self.column_type = column_type
        self.supported = supported
        super().__init__(
            f"An invalid column type was specified: {column_type!r} "
            f"(supported: {', '.join(sorted(supported))})"
        )
