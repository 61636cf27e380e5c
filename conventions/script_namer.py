"""
conventions/script_namer.py
---------------------------
Conventional file names for migrations whose SQL lives in external scripts.

Format::

    Scripts.<Up|Down>.<version>_<ClassName>_<database tag>.sql

Types that are not migrations get an empty name ("not applicable").
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from conventions.classifier import is_migration
from conventions.marker_reader import DEFAULT_MARKER_READER, MarkerReader
from models.markers import MarkerKind


class ScriptDirection(str, Enum):
    UP = "Up"
    DOWN = "Down"


def auto_script_name(
    direction: ScriptDirection,
    type_: Any,
    database_tag: str,
    reader: MarkerReader = DEFAULT_MARKER_READER,
) -> str:
    if not is_migration(type_, reader):
        return ""
    version = reader.markers_of(type_, MarkerKind.MIGRATION)[0].version
    direction = ScriptDirection(direction)
    return f"Scripts.{direction.value}.{version}_{type_.__name__}_{database_tag}.sql"


def auto_script_up_name(
    type_: Any, database_tag: str, reader: MarkerReader = DEFAULT_MARKER_READER
) -> str:
    return auto_script_name(ScriptDirection.UP, type_, database_tag, reader)


def auto_script_down_name(
    type_: Any, database_tag: str, reader: MarkerReader = DEFAULT_MARKER_READER
) -> str:
    return auto_script_name(ScriptDirection.DOWN, type_, database_tag, reader)
