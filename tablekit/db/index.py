"""Index value object."""

from dataclasses import dataclass, field
from typing import Any

from tablekit.types import IndexColumnsType, OptionsType


def normalize_columns(columns: IndexColumnsType) -> list[str]:
    """Turn a single column name or a sequence of names into a list."""
    if isinstance(columns, str):
        return [columns]
    return list(columns)


@dataclass
class Index:
    """Description of a single table index."""

    columns: list[str] = field(default_factory=list)
    unique: bool = False
    name: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.columns = normalize_columns(self.columns)
        if not self.columns:
            raise ValueError("An index must cover at least one column")

    @classmethod
    def from_options(
        cls, columns: IndexColumnsType, options: OptionsType | None = None
    ) -> "Index":
        """Build an index from column name(s) and an options mapping.

        Recognised keys: unique, name. Anything else lands in ``extra``.
        """
        index = cls(columns=normalize_columns(columns))
        for key, value in (options or {}).items():
            if key == "unique":
                index.unique = bool(value)
            elif key == "name":
                index.name = value
            else:
                index.extra[key] = value
        return index

    @property
    def options(self) -> dict[str, Any]:
        """All options of this index as a plain mapping."""
        options: dict[str, Any] = {"unique": self.unique}
        if self.name is not None:
            options["name"] = self.name
        options.update(self.extra)
        return options
