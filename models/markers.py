"""
models/markers.py
-----------------
Declarative metadata ("markers") attached to migration-related classes.

A marker is a frozen payload object with a :class:`MarkerKind`. Markers are
attached with class decorators::

    @migration(20180101000000, "Create orders table")
    @tags("prod", "eu", behavior=TagBehavior.REQUIRE_ALL)
    @migration_trait("owner", "billing")
    class CreateOrders:
        def up(self): ...
        def down(self): ...

Design Decisions:
    * Markers live in the decorated class's own ``__dict__`` under
      ``MARKERS_ATTRIBUTE``; a subclass never mutates its parent's tuple.
      Whether a reader also looks at base classes is the reader's choice.
    * Stacked decorators apply bottom-up, so each decorator prepends its
      marker. The stored tuple therefore follows source reading order
      (top to bottom), which is what "last declared" refers to.
    * Decorators validate only what is invalid at declaration time (an
      empty tag list, a non-string trait name). Version and description
      are validated when a descriptor is built, so a malformed migration
      fails on its own without breaking the import of its module.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, TypeVar

MARKERS_ATTRIBUTE = "__migration_markers__"

T = TypeVar("T", bound=type)


class MarkerKind(str, Enum):
    """Closed vocabulary of marker kinds."""
    MIGRATION = "migration"
    PROFILE = "profile"
    MAINTENANCE = "maintenance"
    VERSION_TABLE_METADATA = "version_table_metadata"
    TAGS = "tags"
    TRAIT = "trait"


class TagBehavior(str, Enum):
    """How a tag declaration is matched against the requested tag set."""
    REQUIRE_ALL = "require_all"
    REQUIRE_ANY = "require_any"


class MigrationStage(str, Enum):
    """When a maintenance migration runs relative to the main sequence."""
    BEFORE_ALL = "before_all"
    BEFORE_EACH = "before_each"
    BEFORE_PROFILES = "before_profiles"
    AFTER_EACH = "after_each"
    AFTER_ALL = "after_all"


class TransactionBehavior(str, Enum):
    DEFAULT = "default"
    NONE = "none"


# ---------------------------------------------------------------------------
# Marker payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MigrationMarker:
    """
    Identifies a class as a migration.

    Attributes:
        version:               Caller-assigned, positive, unique version.
        description:           Human readable summary.
        transaction_behavior:  Whether the runner wraps it in a transaction.
        breaking_change:       Flags a migration the runner may want to
                               confirm before applying.
    """
    version: Any
    description: Any = ""
    transaction_behavior: TransactionBehavior = TransactionBehavior.DEFAULT
    breaking_change: bool = False
    kind: MarkerKind = MarkerKind.MIGRATION


@dataclass(frozen=True)
class ProfileMarker:
    """Identifies a class as a seed-data profile."""
    profile_name: str
    kind: MarkerKind = MarkerKind.PROFILE


@dataclass(frozen=True)
class MaintenanceMarker:
    stage: MigrationStage
    kind: MarkerKind = MarkerKind.MAINTENANCE


@dataclass(frozen=True)
class VersionTableMetadataMarker:
    kind: MarkerKind = MarkerKind.VERSION_TABLE_METADATA


@dataclass(frozen=True)
class TagsMarker:
    """
    One tag declaration.

    Attributes:
        tag_names:  Non-empty set of tag names.
        behavior:   Quantifier used when matching against requested tags.
    """
    tag_names: frozenset[str]
    behavior: TagBehavior = TagBehavior.REQUIRE_ALL
    kind: MarkerKind = MarkerKind.TAGS


@dataclass(frozen=True)
class TraitMarker:
    name: str
    value: Any = None
    kind: MarkerKind = MarkerKind.TRAIT


AnyMarker = (
    MigrationMarker
    | ProfileMarker
    | MaintenanceMarker
    | VersionTableMetadataMarker
    | TagsMarker
    | TraitMarker
)


# ---------------------------------------------------------------------------
# Decorators
# ---------------------------------------------------------------------------

def own_markers(cls: type) -> tuple[AnyMarker, ...]:
    """Return the markers declared directly on *cls* (not inherited)."""
    return vars(cls).get(MARKERS_ATTRIBUTE, ())


def attach_marker(cls: T, marker: AnyMarker) -> T:
    """
    Prepend *marker* to the markers declared directly on *cls*.

    Raises:
        TypeError: If *cls* is not a class.
    """
    if not isinstance(cls, type):
        raise TypeError(
            f"Markers can only be attached to classes, got {type(cls).__name__}"
        )
    setattr(cls, MARKERS_ATTRIBUTE, (marker,) + own_markers(cls))
    return cls


def _decorator(marker: AnyMarker) -> Callable[[T], T]:
    def apply(cls: T) -> T:
        return attach_marker(cls, marker)
    return apply


def migration(
    version: int,
    description: str = "",
    transaction_behavior: TransactionBehavior = TransactionBehavior.DEFAULT,
    breaking_change: bool = False,
) -> Callable[[T], T]:
    return _decorator(
        MigrationMarker(
            version=version,
            description=description,
            transaction_behavior=transaction_behavior,
            breaking_change=breaking_change,
        )
    )


def profile(profile_name: str) -> Callable[[T], T]:
    return _decorator(ProfileMarker(profile_name=profile_name))


def maintenance(stage: MigrationStage) -> Callable[[T], T]:
    return _decorator(MaintenanceMarker(stage=MigrationStage(stage)))


def version_table_metadata(cls: T) -> T:
    """Mark *cls* as describing the version table. Used without arguments."""
    return attach_marker(cls, VersionTableMetadataMarker())


def tags(*tag_names: str, behavior: TagBehavior = TagBehavior.REQUIRE_ALL) -> Callable[[T], T]:
    """
    Declare a set of tags for a migration.

    Raises:
        ValueError: If no tag names are given, or a name is empty.
    """
    if not tag_names:
        raise ValueError("A tag declaration needs at least one tag name")
    if any(not isinstance(t, str) or not t for t in tag_names):
        raise ValueError(f"Tag names must be non-empty strings: {tag_names!r}")
    return _decorator(
        TagsMarker(tag_names=frozenset(tag_names), behavior=TagBehavior(behavior))
    )


def migration_trait(name: str, value: Any = None) -> Callable[[T], T]:
    if not isinstance(name, str) or not name:
        raise TypeError(f"Trait name must be a non-empty string, got {name!r}")
    return _decorator(TraitMarker(name=name, value=value))
