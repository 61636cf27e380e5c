"""conventions/__init__.py"""
from conventions.classifier import (
    Classification,
    classify,
    has_tags,
    is_migration,
    is_profile,
    is_version_table_metadata,
    maintenance_stage_of,
)
from conventions.conventions import DEFAULT_CONVENTIONS, MigrationConventions
from conventions.descriptor_builder import (
    InstantiationError,
    MissingMetadataError,
    build_descriptor,
)
from conventions.discovery import (
    DuplicateVersionError,
    discover_maintenance,
    discover_migrations,
    discover_profiles,
    is_eligible,
)
from conventions.marker_reader import (
    DecoratorMarkerReader,
    MarkerReader,
    RegistryMarkerReader,
)
from conventions.naming import (
    constraint_name,
    foreign_key_name,
    index_name,
    primary_key_name,
)
from conventions.script_namer import ScriptDirection, auto_script_name
from conventions.sql_text_writer import SqlTextWriter
from conventions.tag_filter import matches_tags

__all__ = [
    "Classification",
    "classify",
    "has_tags",
    "is_migration",
    "is_profile",
    "is_version_table_metadata",
    "maintenance_stage_of",
    "DEFAULT_CONVENTIONS",
    "MigrationConventions",
    "InstantiationError",
    "MissingMetadataError",
    "build_descriptor",
    "DuplicateVersionError",
    "discover_maintenance",
    "discover_migrations",
    "discover_profiles",
    "is_eligible",
    "DecoratorMarkerReader",
    "MarkerReader",
    "RegistryMarkerReader",
    "constraint_name",
    "foreign_key_name",
    "index_name",
    "primary_key_name",
    "ScriptDirection",
    "auto_script_name",
    "SqlTextWriter",
    "matches_tags",
]
