"""
conventions/discovery.py
------------------------
Turns a set of candidate classes into the migrations a run should consider.

Flow per candidate:
    classify → (tagged? check requested tags) → build descriptor

Design Decisions:
    * Untagged migrations are always eligible; tag matching is consulted
      only for tagged ones (see :func:`is_eligible`).
    * A type with malformed metadata is logged and skipped; the rest of the
      pass continues. Two accepted migrations sharing a version abort the
      pass with :class:`DuplicateVersionError`.
    * Results keep the order of the input. Ordering and execution belong
      to the runner.
    * No migration is instantiated here.
"""
from __future__ import annotations

import inspect
from collections import defaultdict
from types import ModuleType
from typing import Any, Iterable

from conventions.conventions import DEFAULT_CONVENTIONS, MigrationConventions
from conventions.descriptor_builder import MissingMetadataError
from logger import get_logger
from models.descriptor import MigrationDescriptor
from models.markers import MigrationStage

log = get_logger(__name__)


class DuplicateVersionError(Exception):
    """Raised when two eligible migrations declare the same version."""

    def __init__(self, version: int, first: type | None, second: type | None) -> None:
        self.version = version
        self.types = (first, second)
        names = ", ".join(getattr(t, "__qualname__", repr(t)) for t in self.types)
        super().__init__(f"Duplicate migration version {version}: {names}")


def candidate_types(source: ModuleType | Iterable[Any]) -> list[Any]:
    """
    Return candidate classes from a module, or the items of an iterable.

    For a module only classes defined in that module are returned, in
    definition order; imported classes are left out.
    """
    if isinstance(source, ModuleType):
        return [
            obj
            for _, obj in vars(source).items()
            if inspect.isclass(obj) and obj.__module__ == source.__name__
        ]
    return list(source)


def is_eligible(
    type_: Any,
    requested_tags: Iterable[str] = (),
    conventions: MigrationConventions = DEFAULT_CONVENTIONS,
) -> bool:
    """Untagged types are always eligible; tagged ones must match."""
    if not conventions.type_has_tags(type_):
        return True
    return conventions.type_has_matching_tags(type_, requested_tags)


def discover_migrations(
    source: ModuleType | Iterable[Any],
    requested_tags: Iterable[str] = (),
    conventions: MigrationConventions = DEFAULT_CONVENTIONS,
    include_maintenance: bool = False,
) -> list[MigrationDescriptor]:
    """
    Build descriptors for every eligible migration in *source*.

    Args:
        source:               Module or iterable of candidate types.
        requested_tags:       Tags active for this run.
        conventions:          Convention set used to classify and build.
        include_maintenance:  Also return migrations carrying a maintenance
                              stage; by default they are left to
                              :func:`discover_maintenance`.

    Returns:
        Descriptors in input order.

    Raises:
        DuplicateVersionError: If two eligible migrations share a version.
    """
    requested = tuple(requested_tags)
    descriptors: list[MigrationDescriptor] = []
    seen: dict[int, MigrationDescriptor] = {}

    for type_ in candidate_types(source):
        if not conventions.type_is_migration(type_):
            continue
        if not include_maintenance and conventions.get_maintenance_stage(type_) is not None:
            continue
        if not is_eligible(type_, requested, conventions):
            log.debug("Skipping %s: tags do not match %s", type_.__qualname__, requested)
            continue
        try:
            descriptor = conventions.get_migration_info(type_)
        except MissingMetadataError as exc:
            log.warning("Skipping migration with invalid metadata: %s", exc)
            continue

        previous = seen.get(descriptor.version)
        if previous is not None:
            raise DuplicateVersionError(
                descriptor.version, previous.migration_type, descriptor.migration_type
            )
        seen[descriptor.version] = descriptor
        descriptors.append(descriptor)

    log.info("Discovered %d migration(s).", len(descriptors))
    return descriptors


def discover_maintenance(
    source: ModuleType | Iterable[Any],
    requested_tags: Iterable[str] = (),
    conventions: MigrationConventions = DEFAULT_CONVENTIONS,
) -> dict[MigrationStage, list[type]]:
    """Group eligible maintenance migrations by stage, in input order."""
    requested = tuple(requested_tags)
    stages: dict[MigrationStage, list[type]] = defaultdict(list)
    for type_ in candidate_types(source):
        stage = conventions.get_maintenance_stage(type_)
        if stage is None or not is_eligible(type_, requested, conventions):
            continue
        stages[stage].append(type_)
    log.debug(
        "Discovered maintenance migrations: %s",
        {stage.value: len(types) for stage, types in stages.items()},
    )
    return dict(stages)


def discover_profiles(
    source: ModuleType | Iterable[Any],
    profile_name: str,
    conventions: MigrationConventions = DEFAULT_CONVENTIONS,
) -> list[type]:
    """Return profile types declared for *profile_name* (case-insensitive)."""
    wanted = profile_name.casefold()
    result: list[type] = []
    for type_ in candidate_types(source):
        if not conventions.type_is_profile(type_):
            continue
        names = conventions.get_profile_names(type_)
        if any(name.casefold() == wanted for name in names):
            result.append(type_)
    return result
