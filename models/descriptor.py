"""
models/descriptor.py
--------------------
The built record of one migration: metadata plus a deferred factory.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping

from models.markers import TransactionBehavior

MigrationFactory = Callable[[], Any]


@dataclass(frozen=True)
class MigrationDescriptor:
    """
    Metadata of a classified migration type. Immutable once built.

    Attributes:
        version:               Caller-assigned migration version.
        description:           Human readable summary.
        transaction_behavior:  Transaction handling requested by the migration.
        create_instance:       Zero-argument factory for the runnable
                               migration. Never called by this package;
                               each call constructs a new instance.
        traits:                Read-only mapping of named traits declared on
                               the type.
        is_breaking_change:    Copied from the migration marker.
        migration_type:        The class the descriptor was built from.
    """
    version: int
    description: str
    transaction_behavior: TransactionBehavior
    create_instance: MigrationFactory = field(repr=False, compare=False)
    traits: Mapping[str, Any] = field(default_factory=dict, hash=False)
    is_breaking_change: bool = False
    migration_type: type | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "traits", MappingProxyType(dict(self.traits)))

    @property
    def name(self) -> str:
        return f"{self.version}: {self.description}"

    def has_trait(self, name: str) -> bool:
        return name in self.traits

    def trait(self, name: str, default: Any = None) -> Any:
        return self.traits.get(name, default)

    def __str__(self) -> str:
        return self.name
