"""Built-in transform table and the process-wide default registry."""

from collections.abc import Mapping
from typing import Any, Callable

from fieldtransform.transforms.date import create_date_transform
from fieldtransform.transforms.registry import (
    TransformCreator,
    Transformer,
    TransformRegistry,
)
from fieldtransform.transforms.scalar import (
    create_bool_transform,
    create_float_transform,
    create_int_transform,
    create_string_transform,
)
from fieldtransform.transforms.sequences import (
    create_join_transform,
    create_split_transform,
)
from fieldtransform.transforms.text import (
    create_lower_transform,
    create_trim_transform,
    create_upper_transform,
)

BUILTIN_TRANSFORMS: dict[str, TransformCreator] = {
    "string": create_string_transform,
    "int": create_int_transform,
    "float": create_float_transform,
    "bool": create_bool_transform,
    "date": create_date_transform,
    "split": create_split_transform,
    "join": create_join_transform,
    "upper": create_upper_transform,
    "lower": create_lower_transform,
    "trim": create_trim_transform,
}


def register_builtins(registry: TransformRegistry) -> TransformRegistry:
    """Register every built-in transform type on registry."""
    for name, creator in BUILTIN_TRANSFORMS.items():
        registry.register(name, creator)
    return registry


def new_registry() -> TransformRegistry:
    """Create a registry pre-populated with the built-in transform types."""
    return register_builtins(TransformRegistry())


# Created once at import. Mutable for the life of the process; finish all
# registrations before sharing it between concurrent workers.
default_registry = new_registry()


def register_transform(
    transform_type: str,
    creator: TransformCreator | None = None,
) -> Callable[[TransformCreator], TransformCreator] | None:
    """Register a creator on the default registry (direct call or decorator)."""
    return default_registry.register(transform_type, creator)


def get_transform(
    transform_type: str,
    config: Mapping[str, Any] | None = None,
) -> Transformer:
    """Create a transform from the default registry."""
    return default_registry.create(transform_type, config)


def list_transform_types() -> list[str]:
    """Return the sorted transform types of the default registry."""
    return default_registry.list_transform_types()
