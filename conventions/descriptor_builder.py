"""
conventions/descriptor_builder.py
---------------------------------
Builds :class:`MigrationDescriptor` records for migration types.

Design Decisions:
    * The descriptor's ``create_instance`` is a closure over the type; the
      type is never constructed here. Constructor failures surface when the
      factory is called, wrapped in :class:`InstantiationError`.
    * Malformed metadata raises :class:`MissingMetadataError` for that one
      type only; discovery skips it and moves on.
    * Descriptors are frozen; traits are collected before construction and
      the last declaration of a name wins.
"""
from __future__ import annotations

import numbers
from typing import Any

from conventions.classifier import is_migration
from conventions.marker_reader import DEFAULT_MARKER_READER, MarkerReader
from models.descriptor import MigrationDescriptor, MigrationFactory
from models.markers import MarkerKind, MigrationMarker, TransactionBehavior


class MissingMetadataError(Exception):
    """Raised when a migration type lacks valid version/description metadata."""

    def __init__(self, migration_type: Any, reason: str) -> None:
        self.migration_type = migration_type
        self.reason = reason
        name = getattr(migration_type, "__qualname__", repr(migration_type))
        super().__init__(f"{name}: {reason}")


class InstantiationError(Exception):
    """Raised by a descriptor factory when the migration cannot be constructed."""

    def __init__(self, migration_type: type, cause: BaseException) -> None:
        self.migration_type = migration_type
        super().__init__(
            f"Could not create migration {migration_type.__qualname__}: {cause}"
        )


def _single_migration_marker(type_: Any, reader: MarkerReader) -> MigrationMarker:
    markers = reader.markers_of(type_, MarkerKind.MIGRATION)
    if not markers:
        raise MissingMetadataError(type_, "no migration marker")
    if len(markers) > 1:
        raise MissingMetadataError(
            type_, f"{len(markers)} migration markers declared, expected exactly one"
        )
    return markers[0]


def _validate(type_: Any, marker: MigrationMarker) -> None:
    version = marker.version
    # bool is an Integral but never a version.
    if isinstance(version, bool) or not isinstance(version, numbers.Integral):
        raise MissingMetadataError(
            type_, f"version must be an integer, got {version!r}"
        )
    if version <= 0:
        raise MissingMetadataError(type_, f"version must be positive, got {version}")
    if not isinstance(marker.description, str):
        raise MissingMetadataError(
            type_, f"description must be a string, got {marker.description!r}"
        )
    try:
        TransactionBehavior(marker.transaction_behavior)
    except ValueError:
        raise MissingMetadataError(
            type_, f"unknown transaction behavior {marker.transaction_behavior!r}"
        ) from None


def _factory_for(migration_type: type) -> MigrationFactory:
    def create_instance() -> Any:
        try:
            return migration_type()
        except Exception as exc:
            raise InstantiationError(migration_type, exc) from exc
    return create_instance


def build_descriptor(
    type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER
) -> MigrationDescriptor:
    """
    Build the descriptor of migration type *type_*.

    Args:
        type_:   A class for which :func:`is_migration` holds.
        reader:  Marker reader used for classification and metadata.

    Returns:
        A new :class:`MigrationDescriptor`; the type is not instantiated.

    Raises:
        MissingMetadataError: If *type_* is not a migration, declares more
            than one migration marker, or its version/description is
            absent or malformed.
    """
    if not is_migration(type_, reader):
        raise MissingMetadataError(type_, "not a migration type")

    marker = _single_migration_marker(type_, reader)
    _validate(type_, marker)

    # Applied in declaration order, so the last declaration of a name wins.
    traits = {
        trait.name: trait.value for trait in reader.markers_of(type_, MarkerKind.TRAIT)
    }
    return MigrationDescriptor(
        version=int(marker.version),
        description=marker.description,
        transaction_behavior=TransactionBehavior(marker.transaction_behavior),
        create_instance=_factory_for(type_),
        is_breaking_change=bool(marker.breaking_change),
        traits=traits,
        migration_type=type_,
    )
