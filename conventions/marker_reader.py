"""
conventions/marker_reader.py
----------------------------
Access to the markers attached to a type.

Classifiers depend only on the :class:`MarkerReader` protocol, never on how
markers were attached. Two readers are provided:

    DecoratorMarkerReader  – markers attached with the decorators in
                             :mod:`models.markers`.
    RegistryMarkerReader   – markers registered from outside the type, for
                             classes that cannot be decorated (generated or
                             third-party classes).

Design Decisions:
    * Readers never raise for objects that are not classes; they report
      "no markers" instead, so classification stays total.
    * With ``inherit=True`` markers are returned most-derived class first,
      walking the MRO; otherwise only the type's own declaration counts.
"""
from __future__ import annotations

from typing import Any, Hashable, Iterable, Protocol, runtime_checkable

from models.markers import AnyMarker, MarkerKind, own_markers


@runtime_checkable
class MarkerReader(Protocol):
    """Capability query over a type's markers."""

    def markers_of(self, type_: Any, kind: MarkerKind, inherit: bool = False) -> list[AnyMarker]:
        ...


def _mro(type_: Any, inherit: bool) -> tuple[type, ...]:
    if not isinstance(type_, type):
        return ()
    return type_.__mro__ if inherit else (type_,)


class DecoratorMarkerReader:
    """Reads markers stored on classes by the ``models.markers`` decorators."""

    def markers_of(self, type_: Any, kind: MarkerKind, inherit: bool = False) -> list[AnyMarker]:
        return [
            marker
            for cls in _mro(type_, inherit)
            for marker in own_markers(cls)
            if marker.kind == kind
        ]


class RegistryMarkerReader:
    """
    Marker registry kept outside the types it describes.

    Registered markers precede whatever the ``fallback`` reader (if any)
    reports for the same query.

    Example::

        reader = RegistryMarkerReader(fallback=DecoratorMarkerReader())
        reader.register(LegacyMigration, MigrationMarker(42, "Legacy"))
    """

    def __init__(self, fallback: MarkerReader | None = None) -> None:
        self._fallback = fallback
        self._markers: dict[Hashable, list[AnyMarker]] = {}

    def register(self, type_: Hashable, *markers: AnyMarker) -> None:
        self._markers.setdefault(type_, []).extend(markers)

    def register_many(self, entries: Iterable[tuple[Hashable, Iterable[AnyMarker]]]) -> None:
        for type_, markers in entries:
            self.register(type_, *markers)

    def markers_of(self, type_: Any, kind: MarkerKind, inherit: bool = False) -> list[AnyMarker]:
        chain = _mro(type_, inherit) or (type_,)
        result: list[AnyMarker] = []
        for cls in chain:
            try:
                registered = self._markers.get(cls, ())
            except TypeError:  # unhashable
                registered = ()
            result.extend(m for m in registered if m.kind == kind)
        if self._fallback is not None:
            result.extend(self._fallback.markers_of(type_, kind, inherit))
        return result


DEFAULT_MARKER_READER: MarkerReader = DecoratorMarkerReader()
