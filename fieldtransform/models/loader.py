"""Field transform loader with YAML parsing."""

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from fieldtransform.core.exceptions import TransformConfigError
from fieldtransform.models.transform_config import FieldTransformConfig
from fieldtransform.transforms.chain import build_transform
from fieldtransform.transforms.defaults import default_registry
from fieldtransform.transforms.loader import load_custom_transforms
from fieldtransform.transforms.registry import Transformer, TransformRegistry

logger = logging.getLogger(__name__)


def load_field_transform_config(path: str) -> FieldTransformConfig:
    """
    Load field transform definitions from a YAML file.

    Relative ``custom_transforms`` entries that point at files are resolved
    against the YAML file's directory.

    Args:
        path: Path to YAML file

    Returns:
        Validated FieldTransformConfig

    Raises:
        TransformConfigError: If file not found, invalid YAML, or validation fails
    """
    config_path = Path(path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError:
        raise TransformConfigError(
            f"Transform config file not found: {path}", context={"path": str(path)}
        )
    except yaml.YAMLError as e:
        raise TransformConfigError(
            f"Invalid YAML in transform config file: {e}", context={"path": str(path)}
        ) from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise TransformConfigError(
            "Transform config file must contain a YAML dictionary",
            context={"path": str(path)},
        )

    config_dict["custom_transforms"] = _resolve_module_paths(
        config_dict.get("custom_transforms") or [], config_path.parent
    )

    try:
        return FieldTransformConfig.from_dict(config_dict)
    except ValidationError as e:
        raise TransformConfigError(
            f"Transform config validation failed: {e}", context={"path": str(path)}
        ) from e


def build_field_transforms(
    config: FieldTransformConfig,
    registry: TransformRegistry | None = None,
) -> Dict[str, Transformer]:
    """
    Build one transformer per configured field.

    Custom transform modules are loaded into the registry first.

    Args:
        config: Field transform definitions
        registry: Target registry (default registry when omitted)

    Returns:
        Mapping of field name to ready-to-use transformer
    """
    if registry is None:
        registry = default_registry

    if config.custom_transforms:
        load_custom_transforms(config.custom_transforms, registry)

    transforms = {}
    for field_name, spec in config.fields.items():
        transforms[field_name] = build_transform(spec, registry)
        logger.debug(
            "Built field transform",
            extra={
                "field_name": field_name,
                "transform_type": spec.type or "chain",
            },
        )
    logger.info(
        "Built field transforms",
        extra={"context": {"fields": len(transforms)}},
    )
    return transforms


def load_field_transforms(
    path: str,
    registry: TransformRegistry | None = None,
) -> Dict[str, Transformer]:
    """
    Load a YAML file and build its field transformers.

    Args:
        path: Path to YAML file
        registry: Target registry (default registry when omitted)

    Returns:
        Mapping of field name to ready-to-use transformer
    """
    return build_field_transforms(load_field_transform_config(path), registry)


def _resolve_module_paths(entries: Any, base_dir: Path) -> Any:
    if not isinstance(entries, list):
        return entries
    resolved = []
    for entry in entries:
        if isinstance(entry, str) and entry.endswith(".py") and not os.path.isabs(entry):
            resolved.append(str((base_dir / entry).resolve()))
        else:
            resolved.append(entry)
    return resolved
