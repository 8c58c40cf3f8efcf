"""Scalar conversion transforms: string, int, float, bool."""

import math
import re
from collections.abc import Mapping
from typing import Any

from fieldtransform.core.exceptions import FormatParseError, TypeConversionError
from fieldtransform.core.type_mapping import (
    ValueKind,
    describe_type,
    kind_of,
    to_canonical_string,
)

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class StringTransform:
    """Renders any value, including None, as its canonical string."""

    name = "string"

    def transform(self, value: Any) -> str:
        return to_canonical_string(value)


class IntTransform:
    """Converts a value to an integer.

    None becomes 0, floats are truncated toward zero and strings are parsed as
    base-10 integers with an optional sign. Booleans are rejected.
    """

    name = "int"

    def transform(self, value: Any) -> int:
        kind = kind_of(value)
        if kind == ValueKind.NULL:
            return 0
        if kind == ValueKind.INTEGER:
            return value
        if kind == ValueKind.FLOAT:
            if not math.isfinite(value):
                raise TypeConversionError(
                    self.name,
                    describe_type(value),
                    f"int transform cannot truncate non-finite float {value!r}",
                )
            return math.trunc(value)
        if kind == ValueKind.STRING:
            return self._parse(value)
        raise TypeConversionError(self.name, describe_type(value))

    def _parse(self, text: str) -> int:
        if not _INT_LITERAL.fullmatch(text):
            raise FormatParseError(self.name, text, "invalid base-10 integer syntax")
        try:
            return int(text)
        except ValueError as e:
            # int() refuses digit strings above sys.get_int_max_str_digits()
            raise FormatParseError(self.name, text, str(e)) from e


class FloatTransform:
    """Converts a value to a float.

    None becomes 0.0, integers are widened and strings are parsed as decimal
    floats. Text whose magnitude overflows a float is rejected rather than
    turned into infinity.
    """

    name = "float"

    def transform(self, value: Any) -> float:
        kind = kind_of(value)
        if kind == ValueKind.NULL:
            return 0.0
        if kind == ValueKind.FLOAT:
            return value
        if kind == ValueKind.INTEGER:
            try:
                return float(value)
            except OverflowError as e:
                raise TypeConversionError(
                    self.name,
                    describe_type(value),
                    f"float transform cannot widen out-of-range integer: {e}",
                ) from e
        if kind == ValueKind.STRING:
            return self._parse(value)
        raise TypeConversionError(self.name, describe_type(value))

    def _parse(self, text: str) -> float:
        if not _FLOAT_LITERAL.fullmatch(text):
            raise FormatParseError(self.name, text, "invalid decimal float syntax")
        result = float(text)
        if math.isinf(result) and "inf" not in text.lower():
            raise FormatParseError(self.name, text, "value out of range")
        return result


class BoolTransform:
    """Converts a value to a boolean.

    Strings must be exactly "true" or "false"; numbers are true when nonzero.
    """

    name = "bool"

    _LITERALS = {"true": True, "false": False}

    def transform(self, value: Any) -> bool:
        kind = kind_of(value)
        if kind == ValueKind.NULL:
            return False
        if kind == ValueKind.BOOLEAN:
            return value
        if kind == ValueKind.STRING:
            if value not in self._LITERALS:
                raise FormatParseError(self.name, value, "expected 'true' or 'false'")
            return self._LITERALS[value]
        if kind in (ValueKind.INTEGER, ValueKind.FLOAT):
            return value != 0
        raise TypeConversionError(self.name, describe_type(value))


def create_string_transform(config: Mapping[str, Any] | None) -> StringTransform:
    """Factory function for StringTransform."""
    return StringTransform()


def create_int_transform(config: Mapping[str, Any] | None) -> IntTransform:
    """Factory function for IntTransform."""
    return IntTransform()


def create_float_transform(config: Mapping[str, Any] | None) -> FloatTransform:
    """Factory function for FloatTransform."""
    return FloatTransform()


def create_bool_transform(config: Mapping[str, Any] | None) -> BoolTransform:
    """Factory function for BoolTransform."""
    return BoolTransform()
