"""Transform module for value conversions.

Provides:
- TransformRegistry: Registration and creation of transform creators
- TransformChain: Sequential executor for transforms on one value
- Built-in transforms: string, int, float, bool, date, split, join,
  upper, lower, trim
"""

from fieldtransform.transforms.registry import (
    FunctionTransform,
    TransformCreator,
    Transformer,
    TransformFunc,
    TransformRegistry,
)
from fieldtransform.transforms.scalar import (
    BoolTransform,
    FloatTransform,
    IntTransform,
    StringTransform,
)
from fieldtransform.transforms.text import LowerTransform, TrimTransform, UpperTransform
from fieldtransform.transforms.date import DateTransform
from fieldtransform.transforms.sequences import JoinTransform, SplitTransform
from fieldtransform.transforms.defaults import (
    BUILTIN_TRANSFORMS,
    default_registry,
    get_transform,
    list_transform_types,
    new_registry,
    register_builtins,
    register_transform,
)
from fieldtransform.transforms.chain import TransformChain, build_transform
from fieldtransform.transforms.loader import load_custom_transforms

__all__ = [
    # Registry
    "TransformRegistry",
    "Transformer",
    "TransformFunc",
    "TransformCreator",
    "FunctionTransform",
    "BUILTIN_TRANSFORMS",
    "default_registry",
    "new_registry",
    "register_builtins",
    "register_transform",
    "get_transform",
    "list_transform_types",
    "load_custom_transforms",
    # Chain
    "TransformChain",
    "build_transform",
    # Transform classes
    "StringTransform",
    "IntTransform",
    "FloatTransform",
    "BoolTransform",
    "DateTransform",
    "SplitTransform",
    "JoinTransform",
    "UpperTransform",
    "LowerTransform",
    "TrimTransform",
]
