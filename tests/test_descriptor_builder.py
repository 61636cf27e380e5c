"""
tests/test_descriptor_builder.py
--------------------------------
Unit tests for conventions/descriptor_builder.py.
Run with: python -m pytest tests/
"""
from __future__ import annotations

import dataclasses

import pytest

from conventions.descriptor_builder import (
    InstantiationError,
    MissingMetadataError,
    build_descriptor,
)
from conventions.marker_reader import DecoratorMarkerReader, RegistryMarkerReader
from models.descriptor import MigrationDescriptor
from models.markers import (
    MigrationMarker,
    TransactionBehavior,
    migration,
    migration_trait,
)


class CountingMigration:
    constructed = 0

    def __init__(self) -> None:
        CountingMigration.constructed += 1

    def up(self) -> None: ...

    def down(self) -> None: ...


@migration_trait("owner", "billing")
@migration_trait("risk", "low")
@migration_trait("owner", "platform")
@migration(20180101000000, "Create orders", TransactionBehavior.NONE, breaking_change=True)
class CreateOrders(CountingMigration):
    pass


@migration(2)
class NoDescription(CountingMigration):
    pass


@migration(3, "Boom")
class ExplodingMigration:
    def __init__(self) -> None:
        raise RuntimeError("connection string missing")

    def up(self) -> None: ...

    def down(self) -> None: ...


@pytest.fixture(autouse=True)
def reset_counter() -> None:
    CountingMigration.constructed = 0


class TestBuildDescriptor:
    def test_metadata(self) -> None:
        descriptor = build_descriptor(CreateOrders)
        assert isinstance(descriptor, MigrationDescriptor)
        assert descriptor.version == 20180101000000
        assert descriptor.description == "Create orders"
        assert descriptor.transaction_behavior is TransactionBehavior.NONE
        assert descriptor.is_breaking_change
        assert descriptor.migration_type is CreateOrders
        assert descriptor.name == "20180101000000: Create orders"

    def test_traits_last_declared_wins(self) -> None:
        descriptor = build_descriptor(CreateOrders)
        assert descriptor.traits == {"owner": "platform", "risk": "low"}
        assert descriptor.has_trait("risk")
        assert descriptor.trait("missing", "x") == "x"

    def test_default_description(self) -> None:
        descriptor = build_descriptor(NoDescription)
        assert descriptor.description == ""
        assert descriptor.transaction_behavior is TransactionBehavior.DEFAULT
        assert descriptor.traits == {}


class TestLaziness:
    def test_build_does_not_construct(self) -> None:
        build_descriptor(CreateOrders)
        assert CountingMigration.constructed == 0

    def test_factory_constructs_each_call(self) -> None:
        descriptor = build_descriptor(CreateOrders)
        first = descriptor.create_instance()
        second = descriptor.create_instance()
        assert isinstance(first, CreateOrders)
        assert first is not second
        assert CountingMigration.constructed == 2

    def test_construction_error_surfaces_at_call(self) -> None:
        descriptor = build_descriptor(ExplodingMigration)
        with pytest.raises(InstantiationError) as info:
            descriptor.create_instance()
        assert info.value.migration_type is ExplodingMigration
        assert isinstance(info.value.__cause__, RuntimeError)


class TestMissingMetadata:
    @pytest.mark.parametrize(
        "marker",
        [
            MigrationMarker(0, "zero"),
            MigrationMarker(-5, "negative"),
            MigrationMarker("1", "string version"),
            MigrationMarker(True, "bool version"),
            MigrationMarker(None, "absent version"),
            MigrationMarker(1, None),
            MigrationMarker(1, "bad behavior", transaction_behavior="sometimes"),
        ],
    )
    def test_malformed_marker(self, marker: MigrationMarker) -> None:
        class Registered(CountingMigration):
            pass

        registry = RegistryMarkerReader()
        registry.register(Registered, marker)
        with pytest.raises(MissingMetadataError) as info:
            build_descriptor(Registered, registry)
        assert info.value.migration_type is Registered

    def test_two_migration_markers(self) -> None:
        @migration(1, "a")
        @migration(2, "b")
        class Twice(CountingMigration):
            pass

        with pytest.raises(MissingMetadataError):
            build_descriptor(Twice)

    def test_not_a_migration(self) -> None:
        with pytest.raises(MissingMetadataError):
            build_descriptor(CountingMigration)

    def test_registry_reader(self) -> None:
        class Legacy(CountingMigration):
            pass

        registry = RegistryMarkerReader(fallback=DecoratorMarkerReader())
        registry.register(Legacy, MigrationMarker(42, "Legacy"))
        assert build_descriptor(Legacy, registry).version == 42


class TestImmutability:
    def test_fields_cannot_be_reassigned(self) -> None:
        descriptor = build_descriptor(CreateOrders)
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.version = 99  # type: ignore[misc]

    def test_traits_are_read_only(self) -> None:
        descriptor = build_descriptor(CreateOrders)
        with pytest.raises(TypeError):
            descriptor.traits["owner"] = "someone else"  # type: ignore[index]
        assert descriptor.trait("owner") == "platform"

    def test_constructor_copies_traits(self) -> None:
        traits = {"risk": "low"}
        descriptor = MigrationDescriptor(
            version=1,
            description="copy",
            transaction_behavior=TransactionBehavior.DEFAULT,
            create_instance=CountingMigration,
            traits=traits,
        )
        traits["risk"] = "high"
        assert descriptor.trait("risk") == "low"

    def test_hashable(self) -> None:
        descriptor = build_descriptor(CreateOrders)
        assert {descriptor: "x"}[descriptor] == "x"
