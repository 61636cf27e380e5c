"""
conventions/tag_filter.py
-------------------------
Matches a type's tag declarations against the tags requested for a run.

Algorithm (all declarations, own and inherited, are considered):
    1. A tagged type never matches an empty request.
    2. REQUIRE_ALL: every tag named by a REQUIRE_ALL declaration must be
       requested (extra requested tags are allowed).
    3. REQUIRE_ANY: the union of all REQUIRE_ANY tag names must contain at
       least one requested tag.
    REQUIRE_ALL is tried first; either success is a match.

The REQUIRE_ALL direction (declared tags must all be requested) is
deliberately the reverse of FluentMigrator's RequireAll check, which accepts
any request made only of declared tags. A request of {"prod"} must not match a
REQUIRE_ALL declaration of {"prod", "eu"}. Do not flip the subset test.

An untagged type never matches. Callers check :func:`has_tags` first and
treat untagged types as always eligible; see
:func:`conventions.discovery.is_eligible`.
"""
from __future__ import annotations

from typing import Any, Iterable

from conventions.marker_reader import DEFAULT_MARKER_READER, MarkerReader
from models.markers import MarkerKind, TagBehavior, TagsMarker


def collect_tag_declarations(
    type_: Any, reader: MarkerReader = DEFAULT_MARKER_READER
) -> list[TagsMarker]:
    return reader.markers_of(type_, MarkerKind.TAGS, inherit=True)


def _tag_names(declarations: list[TagsMarker], behavior: TagBehavior) -> frozenset[str]:
    return frozenset(
        name
        for declaration in declarations
        if declaration.behavior == behavior
        for name in declaration.tag_names
    )


def matches_tags(
    type_: Any,
    requested_tags: Iterable[str],
    reader: MarkerReader = DEFAULT_MARKER_READER,
) -> bool:
    if isinstance(requested_tags, str):
        requested_tags = (requested_tags,)
    requested = frozenset(requested_tags)
    declarations = collect_tag_declarations(type_, reader)

    if declarations and not requested:
        return False

    all_names = _tag_names(declarations, TagBehavior.REQUIRE_ALL)
    if all_names and all_names <= requested:
        return True

    any_names = _tag_names(declarations, TagBehavior.REQUIRE_ANY)
    if any_names and not requested.isdisjoint(any_names):
        return True

    return False
