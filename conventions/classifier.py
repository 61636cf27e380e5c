"""
conventions/classifier.py
-------------------------
Decides what role a type plays from its structure and its markers.

    is_migration              – has the migration capability and a Migration marker.
    is_profile                – has the migration capability and a Profile marker.
    is_version_table_metadata – has the version-table capability and marker.
    maintenance_stage_of      – stage of a migration-capable type's Maintenance
                                marker, or None.
    has_tags                  – carries a Tags marker, own or inherited.

Design Decisions:
    * Capabilities are structural (duck typed): a class has the migration
      capability when it defines callable ``up`` and ``down`` members, no
      base class required. The member sets are data, not code.
    * Nothing here instantiates the type under test, so it is safe to run
      over every discovered class before deciding which are worth building.
    * Inputs that are not classes simply classify as "nothing".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from conventions.marker_reader import DEFAULT_MARKER_READER, MarkerReader
from models.markers import MarkerKind, MigrationStage

_MIGRATION_MEMBERS = frozenset({"up", "down"})
_VERSION_TABLE_MEMBERS = frozenset(
    {
        "schema_name",
        "table_name",
        "column_name",
        "description_column_name",
        "applied_on_column_name",
        "unique_index_name",
    }
)


@dataclass(frozen=True)
class Classification:
    """Every role of one type, as reported by :func:`classify`."""
    is_migration: bool
    is_profile: bool
    is_version_table_metadata: bool
    maintenance_stage: MigrationStage | None
    has_tags: bool


def has_migration_capability(type_: Any) -> bool:
    return isinstance(type_, type) and all(
        callable(getattr(type_, member, None)) for member in _MIGRATION_MEMBERS
    )


def has_version_table_capability(type_: Any) -> bool:
    return isinstance(type_, type) and all(
        hasattr(type_, member) for member in _VERSION_TABLE_MEMBERS
    )


def is_migration(type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER) -> bool:
    return has_migration_capability(type_) and bool(
        reader.markers_of(type_, MarkerKind.MIGRATION)
    )


def is_profile(type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER) -> bool:
    return has_migration_capability(type_) and bool(
        reader.markers_of(type_, MarkerKind.PROFILE)
    )


def is_version_table_metadata(type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER) -> bool:
    return has_version_table_capability(type_) and bool(
        reader.markers_of(type_, MarkerKind.VERSION_TABLE_METADATA)
    )


def maintenance_stage_of(
    type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER
) -> MigrationStage | None:
    """
    Return the maintenance stage of *type_*, or None.

    Independent of :func:`is_migration`: a maintenance step usually carries
    no Migration marker, but may.
    """
    if not has_migration_capability(type_):
        return None
    markers = reader.markers_of(type_, MarkerKind.MAINTENANCE)
    return markers[0].stage if markers else None


def profile_names_of(type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER) -> tuple[str, ...]:
    """Profile names declared on *type_*, or an empty tuple for non-profiles."""
    if not is_profile(type_, reader):
        return ()
    return tuple(m.profile_name for m in reader.markers_of(type_, MarkerKind.PROFILE))


def has_tags(type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER) -> bool:
    return bool(reader.markers_of(type_, MarkerKind.TAGS, inherit=True))


def classify(type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER) -> Classification:
    return Classification(
        is_migration=is_migration(type_, reader),
        is_profile=is_profile(type_, reader),
        is_version_table_metadata=is_version_table_metadata(type_, reader),
        maintenance_stage=maintenance_stage_of(type_, reader),
        has_tags=has_tags(type_, reader),
    )
