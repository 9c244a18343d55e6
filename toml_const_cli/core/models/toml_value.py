"""
TOML value kinds — a tagged view over values produced by ``tomllib``.

``tomllib`` hands back plain Python objects.  Code that needs to know
"is this a table or a string?" asks ``kind_of()`` once and branches on
the resulting ``ValueKind`` instead of scattering isinstance checks.
"""

from __future__ import annotations

import datetime as _dt
from enum import StrEnum
from typing import Any


class ValueKind(StrEnum):
    """Every shape a parsed TOML value can take."""

    TABLE = "table"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"


def kind_of(value: Any) -> ValueKind:
    """Classify a value returned by ``tomllib.loads``.

    Raises:
        TypeError: If the value is not something TOML can represent.
    """
    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, dict):
        return ValueKind.TABLE
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, (_dt.datetime, _dt.date, _dt.time)):
        return ValueKind.DATETIME
    raise TypeError(f"Not a TOML value: {type(value).__name__}")


def get_string(table: dict[str, Any], key: str) -> str | None:
    """Return ``table[key]`` if it is a string, else None."""
    value = table.get(key)
    if value is not None and kind_of(value) is ValueKind.STRING:
        return value
    return None


def get_table(table: dict[str, Any], key: str) -> dict[str, Any] | None:
    """Return ``table[key]`` if it is a table, else None."""
    value = table.get(key)
    if value is not None and kind_of(value) is ValueKind.TABLE:
        return value
    return None
