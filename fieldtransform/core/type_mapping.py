"""Shared value-kind utilities for transforms.

Transforms dispatch over a closed set of value kinds instead of inspecting
arbitrary runtime types, so every transform declares exactly which kinds it
accepts.
"""

import json
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Kind of an untyped value extracted from a JSON-like document."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


NUMERIC_KINDS = frozenset({ValueKind.INTEGER, ValueKind.FLOAT})


def kind_of(value: Any) -> ValueKind:
    """Classify a value into its ValueKind.

    bool is checked before int because bool is an int subclass.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.OTHER


def describe_type(value: Any) -> str:
    """Return a diagnostic name for a value's type, e.g. 'sequence (list)'."""
    kind = kind_of(value)
    type_name = type(value).__name__
    if kind == ValueKind.NULL:
        return kind.value
    return f"{kind.value} ({type_name})"


def to_canonical_string(value: Any) -> str:
    """Render a value in its canonical human-readable form.

    Args:
        value: Any untyped value.

    Returns:
        "" for None, "true"/"false" for booleans, integral floats without a
        fractional part, JSON for sequences and mappings, str() otherwise.
    """
    kind = kind_of(value)
    if kind == ValueKind.NULL:
        return ""
    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.FLOAT:
        return _float_to_string(value)
    if kind == ValueKind.STRING:
        return value
    if kind in (ValueKind.SEQUENCE, ValueKind.MAPPING):
        try:
            return json.dumps(_integral_floats(value, set()), default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            # non-string keys or self-containing containers
            return str(value)
    return str(value)


def _float_to_string(value: float) -> str:
    if _is_small_integral(value):
        return str(int(value))
    return repr(value)


def _is_small_integral(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and abs(value) < 1e21


def _integral_floats(value: Any, active: set[int]) -> Any:
    """Copy containers with integral floats replaced by ints.

    Raises:
        ValueError: If a container contains itself.
    """
    kind = kind_of(value)
    if kind == ValueKind.FLOAT:
        return int(value) if _is_small_integral(value) else value
    if kind not in (ValueKind.SEQUENCE, ValueKind.MAPPING):
        return value
    if id(value) in active:
        raise ValueError("circular reference")
    active.add(id(value))
    try:
        if kind == ValueKind.MAPPING:
            return {key: _integral_floats(item, active) for key, item in value.items()}
        return [_integral_floats(item, active) for item in value]
    finally:
        active.discard(id(value))
