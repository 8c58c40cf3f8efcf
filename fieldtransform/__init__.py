"""Field Transform - registry-driven value normalization.

Converts loosely-typed values extracted from JSON APIs into well-defined
strings, numbers, booleans, timestamps and lists through named, configurable
transforms that can be composed into chains.
"""

__version__ = "0.1.0"

# Exceptions
from fieldtransform.core.exceptions import (
    FieldTransformError,
    FormatParseError,
    TransformConfigError,
    TransformError,
    TypeConversionError,
    UnknownTransformType,
)
from fieldtransform.core.logging import configure_logging

# Models
from fieldtransform.models.loader import (
    build_field_transforms,
    load_field_transform_config,
    load_field_transforms,
)
from fieldtransform.models.transform_config import FieldTransform, FieldTransformConfig

# Registry and chains
from fieldtransform.transforms import (
    TransformChain,
    Transformer,
    TransformRegistry,
    build_transform,
    default_registry,
    get_transform,
    new_registry,
    register_transform,
)

__all__ = [
    # Version
    "__version__",
    # Registry and chains
    "TransformRegistry",
    "Transformer",
    "TransformChain",
    "default_registry",
    "new_registry",
    "register_transform",
    "get_transform",
    "build_transform",
    # Models
    "FieldTransform",
    "FieldTransformConfig",
    "load_field_transform_config",
    "load_field_transforms",
    "build_field_transforms",
    # Logging
    "configure_logging",
    # Exceptions
    "FieldTransformError",
    "TransformError",
    "UnknownTransformType",
    "TypeConversionError",
    "FormatParseError",
    "TransformConfigError",
]
