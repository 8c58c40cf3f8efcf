"""Tests for FieldTransform and FieldTransformConfig models."""

import pytest
from pydantic import ValidationError

from fieldtransform.models.transform_config import FieldTransform, FieldTransformConfig


class TestFieldTransform:
    """Tests for FieldTransform."""

    def test_basic_type(self):
        """Test basic single transform."""
        spec = FieldTransform(type="date", config={"input_format": "Date"})
        assert spec.type == "date"
        assert spec.config == {"input_format": "Date"}
        assert spec.chain == []

    def test_config_defaults_empty(self):
        """Test config defaults to an empty dict."""
        assert FieldTransform(type="trim").config == {}

    def test_null_config_is_empty(self):
        """Test explicit null config."""
        assert FieldTransform.model_validate({"type": "trim", "config": None}).config == {}

    def test_chain(self):
        """Test chain of transforms."""
        spec = FieldTransform.model_validate(
            {"chain": [{"type": "trim"}, {"type": "split", "config": {"delimiter": ";"}}]}
        )
        assert spec.type is None
        assert [entry.type for entry in spec.chain] == ["trim", "split"]
        assert spec.chain[1].config == {"delimiter": ";"}

    def test_requires_type_or_chain(self):
        """Test empty spec is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            FieldTransform()

        assert "requires 'type' or a non-empty 'chain'" in str(exc_info.value)

    def test_empty_chain_rejected(self):
        """Test empty chain without type is rejected."""
        with pytest.raises(ValidationError):
            FieldTransform(chain=[])

    def test_type_and_chain_rejected(self):
        """Test both type and chain is rejected."""
        with pytest.raises(ValidationError):
            FieldTransform(type="trim", chain=[FieldTransform(type="lower")])

    def test_config_on_chain_rejected(self):
        """Test config on a chain spec is rejected."""
        with pytest.raises(ValidationError):
            FieldTransform.model_validate({"chain": [{"type": "trim"}], "config": {"a": 1}})

    def test_blank_type_rejected(self):
        """Test blank type is rejected."""
        with pytest.raises(ValidationError):
            FieldTransform(type="  ")

    def test_extra_fields_rejected(self):
        """Test misspelled keys are rejected."""
        with pytest.raises(ValidationError):
            FieldTransform.model_validate({"type": "trim", "cofig": {}})


class TestFieldTransformConfig:
    """Tests for FieldTransformConfig."""

    def test_empty(self):
        """Test empty config."""
        config = FieldTransformConfig()
        assert config.fields == {}
        assert config.custom_transforms == []

    def test_from_dict(self):
        """Test config from plain dict."""
        config = FieldTransformConfig.from_dict(
            {
                "custom_transforms": ["my_transforms"],
                "fields": {
                    "created": {"type": "date", "config": {"output_format": "Unix"}},
                    "tags": {"chain": [{"type": "trim"}, {"type": "split"}]},
                },
            }
        )
        assert config.custom_transforms == ["my_transforms"]
        assert config.fields["created"].type == "date"
        assert len(config.fields["tags"].chain) == 2

    def test_invalid_field_rejected(self):
        """Test invalid nested field spec is rejected."""
        with pytest.raises(ValidationError):
            FieldTransformConfig.from_dict({"fields": {"bad": {}}})
