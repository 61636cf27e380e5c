"""models/__init__.py"""
from models.descriptor import MigrationDescriptor
from models.markers import (
    MarkerKind,
    MigrationStage,
    TagBehavior,
    TransactionBehavior,
    maintenance,
    migration,
    migration_trait,
    profile,
    tags,
    version_table_metadata,
)
from models.schema import (
    ConstraintDefinition,
    ForeignKeyDefinition,
    IndexColumnDefinition,
    IndexDefinition,
    SchemaObjectDefinition,
)

__all__ = [
    "MigrationDescriptor",
    "MarkerKind",
    "MigrationStage",
    "TagBehavior",
    "TransactionBehavior",
    "maintenance",
    "migration",
    "migration_trait",
    "profile",
    "tags",
    "version_table_metadata",
    "ConstraintDefinition",
    "ForeignKeyDefinition",
    "IndexColumnDefinition",
    "IndexDefinition",
    "SchemaObjectDefinition",
]
