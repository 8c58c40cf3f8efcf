"""Core module for fieldtransform package."""

from fieldtransform.core.exceptions import (
    FieldTransformError,
    FormatParseError,
    TransformConfigError,
    TransformError,
    TypeConversionError,
    UnknownTransformType,
)
from fieldtransform.core.logging import configure_logging
from fieldtransform.core.type_mapping import ValueKind, kind_of, to_canonical_string

__all__ = [
    "FieldTransformError",
    "TransformError",
    "UnknownTransformType",
    "TypeConversionError",
    "FormatParseError",
    "TransformConfigError",
    "configure_logging",
    "ValueKind",
    "kind_of",
    "to_canonical_string",
]
