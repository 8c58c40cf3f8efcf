"""Utilities to load custom transform modules."""

from __future__ import annotations

import importlib
import importlib.util
import inspect
import logging
from pathlib import Path
from types import ModuleType

from fieldtransform.core.exceptions import TransformConfigError
from fieldtransform.transforms.defaults import default_registry
from fieldtransform.transforms.registry import Transformer, TransformRegistry

logger = logging.getLogger(__name__)

REGISTER_HOOK = "register_transforms"


def load_custom_transforms_from_module(
    module_path: str,
    registry: TransformRegistry | None = None,
) -> None:
    """Import a module and register the transforms it defines.

    If the module defines ``register_transforms(registry)`` it is called with
    the target registry. Additionally, public classes defined in the module
    that have a ``transform`` method and are not already registered are
    registered under their snake_case class names; their constructor
    receives the transform config mapping.
    """
    if registry is None:
        registry = default_registry

    module = _import_module(module_path)

    hook = getattr(module, REGISTER_HOOK, None)
    if callable(hook):
        hook(registry)

    for name, obj in inspect.getmembers(module, inspect.isclass):
        if name.startswith("_") or obj.__module__ != module.__name__:
            continue
        if not issubclass(obj, Transformer) or obj is Transformer:
            continue
        transform_type = _camel_to_snake(name)
        if transform_type and transform_type not in registry:
            registry.register(transform_type, lambda cfg, cls=obj: cls(cfg))

    logger.info(
        "Loaded custom transforms",
        extra={"context": {"module": module_path}},
    )


def load_custom_transforms(
    paths: list[str],
    registry: TransformRegistry | None = None,
) -> None:
    """Load all custom transform modules from the provided paths."""
    for path in paths:
        load_custom_transforms_from_module(path, registry)


def _camel_to_snake(name: str) -> str:
    out = ""
    for i, ch in enumerate(name):
        if ch.isupper() and i > 0:
            out += "_"
        out += ch.lower()
    return out


def _import_module(module_path: str) -> ModuleType:
    """Import by module path or file path."""
    path_obj = Path(module_path)
    if path_obj.suffix == ".py" or path_obj.exists():
        spec = importlib.util.spec_from_file_location(path_obj.stem, path_obj)
        if spec is None or spec.loader is None:
            raise TransformConfigError(f"Cannot load module from path: {module_path}")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise TransformConfigError(
                f"Failed to load custom transform module '{module_path}': {exc}"
            ) from exc
        return module

    try:
        return importlib.import_module(module_path)
    except Exception as exc:
        raise TransformConfigError(
            f"Failed to import custom transform module '{module_path}': {exc}"
        ) from exc
