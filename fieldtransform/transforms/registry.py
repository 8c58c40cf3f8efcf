"""Transform registry for managing transform creators."""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Protocol, overload, runtime_checkable

from fieldtransform.core.exceptions import TransformConfigError, UnknownTransformType

logger = logging.getLogger(__name__)


@runtime_checkable
class Transformer(Protocol):
    """Protocol for value transforms."""

    def transform(self, value: Any) -> Any:
        """Convert one untyped value and return the result."""
        ...


TransformFunc = Callable[[Any], Any]
TransformCreator = Callable[[Mapping[str, Any] | None], Transformer | TransformFunc]


class FunctionTransform:
    """Adapts a plain ``f(value)`` callable to the Transformer protocol."""

    def __init__(self, func: TransformFunc):
        self._func = func

    def transform(self, value: Any) -> Any:
        return self._func(value)

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", type(self._func).__name__)
        return f"FunctionTransform({name})"


def as_transformer(obj: Any, transform_type: str = "") -> Transformer:
    """Return obj as a Transformer, wrapping bare callables.

    Raises:
        TransformConfigError: If obj is neither a Transformer nor callable.
    """
    if isinstance(obj, Transformer):
        return obj
    if callable(obj):
        return FunctionTransform(obj)
    raise TransformConfigError(
        "Invalid transform: must be callable or have transform() method",
        context={"transform_type": transform_type, "result_type": type(obj).__name__},
    )


def string_option(
    config: Mapping[str, Any] | None,
    key: str,
    default: str,
    transform_type: str,
) -> str:
    """Read a string option from a creator config.

    Missing keys and non-string values take the default.
    """
    value = config.get(key) if config else None
    if not isinstance(value, str):
        if value is not None:
            logger.debug(
                "Ignoring non-string transform option",
                extra={
                    "transform_type": transform_type,
                    "context": {"option": key, "value_type": type(value).__name__},
                },
            )
        return default
    return value


class TransformRegistry:
    """Maps transform type names to creators.

    Names are case-sensitive. Registering a name that already exists replaces
    the previous creator. Reads and writes are not synchronized: register
    everything before sharing the registry between workers, or publish a
    ``copy()`` once configuration is complete.
    """

    def __init__(self, creators: Mapping[str, TransformCreator] | None = None):
        self._creators: dict[str, TransformCreator] = dict(creators or {})

    @overload
    def register(self, name: str) -> Callable[[TransformCreator], TransformCreator]: ...

    @overload
    def register(self, name: str, creator: TransformCreator) -> None: ...

    def register(
        self,
        name: str,
        creator: TransformCreator | None = None,
    ) -> Callable[[TransformCreator], TransformCreator] | None:
        """Register a transform creator.

        Can be used as a decorator or called directly:

            # As decorator
            @registry.register("prefix")
            def create_prefix_transform(config):
                return PrefixTransform(config)

            # Direct call
            registry.register("prefix", create_prefix_transform)

        Args:
            name: Transform type name (e.g., 'trim').
            creator: Creator function (optional if used as decorator).
        """

        def _register(c: TransformCreator) -> TransformCreator:
            if name in self._creators:
                logger.debug("Replacing transform creator", extra={"transform_type": name})
            else:
                logger.debug("Registering transform creator", extra={"transform_type": name})
            self._creators[name] = c
            return c

        if creator is not None:
            _register(creator)
            return None

        return _register

    def create(self, name: str, config: Mapping[str, Any] | None = None) -> Transformer:
        """Create a transform instance using the registered creator.

        Args:
            name: The transform type to instantiate.
            config: Transform configuration; None is treated as empty.

        Returns:
            A Transformer instance.

        Raises:
            UnknownTransformType: If name is not registered.
            TransformError: Whatever the creator raises, unchanged.
        """
        creator = self._creators.get(name)
        if creator is None:
            raise UnknownTransformType(name, self.list_transform_types())
        logger.debug("Creating transform", extra={"transform_type": name})
        result = creator(config if config is not None else {})
        return as_transformer(result, name)

    def list_transform_types(self) -> list[str]:
        """Return a sorted list of all registered transform types."""
        return sorted(self._creators.keys())

    def copy(self) -> "TransformRegistry":
        """Return an independent registry with the same registrations."""
        return TransformRegistry(self._creators)

    def clear(self) -> None:
        """Remove all registrations."""
        self._creators.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._creators

    def __len__(self) -> int:
        return len(self._creators)
