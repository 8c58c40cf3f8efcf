"""Models module for field transform definitions."""

from fieldtransform.models.transform_config import FieldTransform, FieldTransformConfig

__all__ = [
    "FieldTransform",
    "FieldTransformConfig",
]
