"""
models/schema.py
----------------
Immutable descriptions of the schema objects that receive generated names.

Design Decision:
    Frozen dataclasses with tuple-valued column lists give value equality
    and hashability, so two descriptions of the same object are
    interchangeable everywhere a name is derived from them. Column order
    is preserved exactly as supplied; nothing here sorts.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


def _as_tuple(values: Iterable[str]) -> tuple[str, ...]:
    if isinstance(values, str):
        # A bare string is one column name, not a sequence of characters.
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class ForeignKeyDefinition:
    """
    A foreign key from ``foreign_table`` to ``primary_table``.

    Attributes:
        foreign_table:    Table holding the referencing columns.
        foreign_columns:  Referencing columns, in declared order.
        primary_table:    Table holding the referenced key.
        primary_columns:  Referenced columns, in declared order.
    """
    foreign_table: str
    foreign_columns: tuple[str, ...]
    primary_table: str
    primary_columns: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "foreign_columns", _as_tuple(self.foreign_columns))
        object.__setattr__(self, "primary_columns", _as_tuple(self.primary_columns))


@dataclass(frozen=True)
class IndexColumnDefinition:
    """One column participating in an index."""
    name: str


@dataclass(frozen=True)
class IndexDefinition:
    """
    An index over ``table_name``.

    ``columns`` accepts :class:`IndexColumnDefinition` instances or plain
    column names; plain names are wrapped on construction.
    """
    table_name: str
    columns: tuple[IndexColumnDefinition, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        raw = (self.columns,) if isinstance(self.columns, str) else self.columns
        normalised = tuple(
            c if isinstance(c, IndexColumnDefinition) else IndexColumnDefinition(c)
            for c in raw
        )
        object.__setattr__(self, "columns", normalised)

    @property
    def column_names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self.columns)


@dataclass(frozen=True)
class ConstraintDefinition:
    """A unique or primary-key constraint over ``table_name``."""
    table_name: str
    columns: tuple[str, ...] = field(default_factory=tuple)
    is_primary_key_constraint: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", _as_tuple(self.columns))


# Union type alias
SchemaObjectDefinition = ForeignKeyDefinition | IndexDefinition | ConstraintDefinition
