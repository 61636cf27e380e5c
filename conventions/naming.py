"""
conventions/naming.py
---------------------
Default names for schema objects created without an explicit name.

Every function is pure: equal definitions always produce equal names, so a
migration can be re-applied to an already-migrated schema and find the
objects it created before. Columns are joined in the order given. Length
limits and quoting are left to the dialect that consumes the name.

Examples::

    primary_key_name("Orders")                                 → "PK_Orders"
    index_name(IndexDefinition("Orders", ["CustomerId"]))      → "IX_Orders_CustomerId"
    constraint_name(ConstraintDefinition("Orders", ["Code"]))  → "UC_Orders_Code"
"""
from __future__ import annotations

from typing import Iterable

from models.schema import ConstraintDefinition, ForeignKeyDefinition, IndexDefinition


def _join(prefix: str, table: str, columns: Iterable[str]) -> str:
    return prefix + table + "".join("_" + column for column in columns)


def primary_key_name(table: str | ConstraintDefinition | IndexDefinition) -> str:
    """Accepts a table name or any definition carrying ``table_name``."""
    table_name = table if isinstance(table, str) else table.table_name
    return "PK_" + table_name


def foreign_key_name(foreign_key: ForeignKeyDefinition) -> str:
    return (
        _join("FK_", foreign_key.foreign_table, foreign_key.foreign_columns)
        + _join("_", foreign_key.primary_table, foreign_key.primary_columns)
    )


def index_name(index: IndexDefinition) -> str:
    return _join("IX_", index.table_name, (column.name for column in index.columns))


def constraint_name(constraint: ConstraintDefinition) -> str:
    prefix = "PK_" if constraint.is_primary_key_constraint else "UC_"
    return _join(prefix, constraint.table_name, constraint.columns)
