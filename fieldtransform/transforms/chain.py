"""Transform chain executor for applying transforms to a single value."""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from fieldtransform.core.exceptions import TransformConfigError
from fieldtransform.models.transform_config import FieldTransform
from fieldtransform.transforms.defaults import default_registry
from fieldtransform.transforms.registry import (
    TransformFunc,
    Transformer,
    TransformRegistry,
    as_transformer,
)

logger = logging.getLogger(__name__)


class TransformChain:
    """Applies transforms sequentially to one value.

    Each transform receives the previous transform's output. The first
    failure propagates unchanged and no later transform runs. An empty chain
    returns its input.
    """

    def __init__(self, *transforms: Transformer | TransformFunc):
        """Initialize chain with already-constructed transforms.

        Args:
            transforms: Transformers (or plain callables) in application order.
        """
        self._transforms: tuple[Transformer, ...] = tuple(
            as_transformer(t) for t in transforms
        )

    @property
    def transforms(self) -> tuple[Transformer, ...]:
        return self._transforms

    def transform(self, value: Any) -> Any:
        """Apply all transforms in order.

        Args:
            value: Input value.

        Returns:
            Output of the last transform.

        Raises:
            Exception: Whatever the failing transform raised.
        """
        result = value
        for step_index, step in enumerate(self._transforms):
            try:
                result = step.transform(result)
            except Exception:
                logger.debug(
                    "Transform chain aborted",
                    extra={
                        "context": {
                            "step_index": step_index,
                            "transform": type(step).__name__,
                        }
                    },
                )
                raise
        return result

    def __len__(self) -> int:
        return len(self._transforms)

    def __iter__(self) -> Iterator[Transformer]:
        return iter(self._transforms)

    def __repr__(self) -> str:
        return f"TransformChain({', '.join(repr(t) for t in self._transforms)})"


def build_transform(
    spec: FieldTransform | Mapping[str, Any],
    registry: TransformRegistry | None = None,
) -> Transformer:
    """Materialize a field transform spec into a single transformer.

    A spec with ``type`` is created through the registry; a spec with
    ``chain`` becomes a TransformChain of its recursively built entries.

    Args:
        spec: FieldTransform model or equivalent mapping.
        registry: Registry to resolve type names against (default registry
                  when omitted).

    Returns:
        Ready-to-use Transformer.

    Raises:
        TransformConfigError: If the spec is invalid.
        UnknownTransformType: If a type name is not registered.
    """
    if registry is None:
        registry = default_registry

    if not isinstance(spec, FieldTransform):
        try:
            spec = FieldTransform.model_validate(spec)
        except ValidationError as e:
            raise TransformConfigError(
                f"Invalid field transform: {e}",
                context={"spec": spec},
            ) from e

    if spec.chain:
        return TransformChain(*(build_transform(entry, registry) for entry in spec.chain))
    return registry.create(spec.type, spec.config)
