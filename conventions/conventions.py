"""
conventions/conventions.py
--------------------------
The overridable set of migration conventions.

:class:`MigrationConventions` bundles one named strategy per convention. The
defaults are the functions of this package; a host overrides a convention by
supplying another callable with the same signature::

    custom = dataclasses.replace(
        DEFAULT_CONVENTIONS,
        get_index_name=lambda index: "idx_" + index.table_name,
    )

Design Decision:
    A frozen dataclass of callables keeps each convention independently
    replaceable without subclassing, and an instance can be shared between
    threads because nothing in it mutates.
"""
from __future__ import annotations

import functools
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable

from config import CONFIG, AppConfig
from conventions import classifier, descriptor_builder, naming, script_namer, tag_filter
from conventions.classifier import Classification
from conventions.marker_reader import DEFAULT_MARKER_READER, MarkerReader
from models.descriptor import MigrationDescriptor
from models.markers import MigrationStage
from models.schema import ConstraintDefinition, ForeignKeyDefinition, IndexDefinition


def _working_directory(config: AppConfig) -> str:
    configured = config.conventions.working_directory
    return str(configured if configured is not None else Path.cwd())


def _default_schema(config: AppConfig) -> str | None:
    return config.conventions.default_schema


@dataclass(frozen=True)
class MigrationConventions:
    """Named strategy functions consulted by a migration runner."""
    get_primary_key_name: Callable[[str], str] = naming.primary_key_name
    get_foreign_key_name: Callable[[ForeignKeyDefinition], str] = naming.foreign_key_name
    get_index_name: Callable[[IndexDefinition], str] = naming.index_name
    get_constraint_name: Callable[[ConstraintDefinition], str] = naming.constraint_name
    type_is_migration: Callable[[Any], bool] = classifier.is_migration
    type_is_profile: Callable[[Any], bool] = classifier.is_profile
    type_is_version_table_metadata: Callable[[Any], bool] = classifier.is_version_table_metadata
    get_maintenance_stage: Callable[[Any], MigrationStage | None] = classifier.maintenance_stage_of
    get_profile_names: Callable[[Any], tuple[str, ...]] = classifier.profile_names_of
    type_has_tags: Callable[[Any], bool] = classifier.has_tags
    type_has_matching_tags: Callable[[Any, Iterable[str]], bool] = tag_filter.matches_tags
    get_migration_info: Callable[[Any], MigrationDescriptor] = descriptor_builder.build_descriptor
    get_auto_script_up_name: Callable[[Any, str], str] = script_namer.auto_script_up_name
    get_auto_script_down_name: Callable[[Any, str], str] = script_namer.auto_script_down_name
    get_working_directory: Callable[[], str] = field(
        default=functools.partial(_working_directory, CONFIG)
    )
    get_default_schema: Callable[[], str | None] = field(
        default=functools.partial(_default_schema, CONFIG)
    )

    @classmethod
    def create(
        cls,
        reader: MarkerReader = DEFAULT_MARKER_READER,
        config: AppConfig = CONFIG,
    ) -> "MigrationConventions":
        """
        Build the default conventions bound to *reader* and *config*.

        Use this when markers come from somewhere other than the decorators,
        e.g. a :class:`~conventions.marker_reader.RegistryMarkerReader`.
        """
        def bind(fn: Callable[..., Any]) -> Callable[..., Any]:
            return functools.partial(fn, reader=reader)

        return cls(
            type_is_migration=bind(classifier.is_migration),
            type_is_profile=bind(classifier.is_profile),
            type_is_version_table_metadata=bind(classifier.is_version_table_metadata),
            get_maintenance_stage=bind(classifier.maintenance_stage_of),
            get_profile_names=bind(classifier.profile_names_of),
            type_has_tags=bind(classifier.has_tags),
            type_has_matching_tags=bind(tag_filter.matches_tags),
            get_migration_info=bind(descriptor_builder.build_descriptor),
            get_auto_script_up_name=bind(script_namer.auto_script_up_name),
            get_auto_script_down_name=bind(script_namer.auto_script_down_name),
            get_working_directory=functools.partial(_working_directory, config),
            get_default_schema=functools.partial(_default_schema, config),
        )

    def classify(self, type_: Any) -> Classification:
        """All roles of *type_*, as decided by this convention set."""
        return Classification(
            is_migration=self.type_is_migration(type_),
            is_profile=self.type_is_profile(type_),
            is_version_table_metadata=self.type_is_version_table_metadata(type_),
            maintenance_stage=self.get_maintenance_stage(type_),
            has_tags=self.type_has_tags(type_),
        )


DEFAULT_CONVENTIONS = MigrationConventions()
