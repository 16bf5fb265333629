"""Column value object."""

from dataclasses import dataclass, field, fields
from typing import Any

from tablekit.types import ColumnType, OptionsType

# Option keys that differ from the attribute they populate
_OPTION_ALIASES = {
    "null": "nullable",
    "length": "limit",
}


@dataclass
class Column:
    """Description of a single table column.

    Only ``name`` and ``type`` are structural; everything else is an option.
    Options the toolkit does not know about are kept in ``extra`` so that
    adapters can read their own extensions.
    """

    name: str = ""
    type: str | None = None
    limit: int | None = None
    default: Any = None
    nullable: bool = True
    precision: int | None = None
    scale: int | None = None
    after: str | None = None
    identity: bool = False
    comment: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.type, ColumnType):
            self.type = self.type.value

    @classmethod
    def from_options(
        cls,
        name: str,
        column_type: str | None,
        options: OptionsType | None = None,
    ) -> "Column":
        """Build a column from a name, a type and an options mapping."""
        column = cls(name=name, type=column_type)
        if options:
            column.set_options(options)
        return column

    def set_options(self, options: OptionsType) -> "Column":
        """Apply an options mapping onto this column.

        Recognised keys: limit (alias length), default, null, precision,
        scale, after, identity, comment.
        """
        for key, value in options.items():
            attr = _OPTION_ALIASES.get(key, key)
            if attr in _OPTION_FIELDS:
                setattr(self, attr, value)
            else:
                self.extra[key] = value
        return self

    @property
    def options(self) -> dict[str, Any]:
        """All options of this column as a plain mapping."""
        options: dict[str, Any] = {
            "limit": self.limit,
            "default": self.default,
            "null": self.nullable,
            "precision": self.precision,
            "scale": self.scale,
            "after": self.after,
            "identity": self.identity,
            "comment": self.comment,
        }
        options.update(self.extra)
        return options

    def is_identity(self) -> bool:
        """Whether the column auto-increments."""
        return self.identity or self.type == ColumnType.PRIMARY_KEY.value


_OPTION_FIELDS = frozenset(
    f.name for f in fields(Column) if f.name not in ("name", "type", "extra")
)
