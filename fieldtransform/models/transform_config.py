"""Transform configuration models for field transform definitions."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FieldTransform(BaseModel):
    """
    Transform applied to one field.

    Either names a single transform ``type`` with its ``config``, or lists a
    ``chain`` of nested field transforms applied in order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Optional[str] = Field(
        default=None, description="Transform type (e.g., 'date', 'int', 'split')"
    )
    config: Dict[str, Any] = Field(
        default_factory=dict, description="Transform-specific configuration"
    )
    chain: List["FieldTransform"] = Field(
        default_factory=list, description="Transforms applied in sequence"
    )

    @field_validator("config", mode="before")
    @classmethod
    def validate_config(cls, v):
        """Treat an explicit null config as empty."""
        if v is None:
            return {}
        return v

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        """Validate type is not blank."""
        if v is not None and not v.strip():
            raise ValueError("type must not be empty")
        return v

    @model_validator(mode="after")
    def validate_type_or_chain(self):
        """Validate exactly one of type or chain is given."""
        if self.type is None and not self.chain:
            raise ValueError("field transform requires 'type' or a non-empty 'chain'")
        if self.type is not None and self.chain:
            raise ValueError("field transform cannot set both 'type' and 'chain'")
        if self.chain and self.config:
            raise ValueError("'config' applies to 'type'; set it on each chain entry")
        return self


FieldTransform.model_rebuild()


class FieldTransformConfig(BaseModel):
    """Field transform definitions for a pipeline."""

    model_config = ConfigDict(extra="forbid")

    fields: Dict[str, FieldTransform] = Field(
        default_factory=dict, description="Field name to transform mapping"
    )
    custom_transforms: List[str] = Field(
        default_factory=list,
        description="Modules or .py files that register custom transform types",
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldTransformConfig":
        """Create config from a plain dictionary (e.g. parsed YAML)."""
        return cls.model_validate(data)
