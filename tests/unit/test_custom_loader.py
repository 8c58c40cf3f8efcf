"""Tests for loading custom transform modules."""

import pytest

from fieldtransform.core.exceptions import TransformConfigError
from fieldtransform.transforms import build_transform, load_custom_transforms
from fieldtransform.transforms.loader import (
    _camel_to_snake,
    load_custom_transforms_from_module,
)


class TestLoadCustomTransforms:
    """Tests for load_custom_transforms_from_module."""

    def test_classes_registered_by_snake_case_name(self, custom_module, registry):
        """Public transform classes are registered automatically."""
        load_custom_transforms_from_module(str(custom_module), registry)

        assert "prefix_transform" in registry
        transform = registry.create("prefix_transform", {"prefix": "ID_"})
        assert transform.transform("42") == "ID_42"

    def test_hook_is_called(self, custom_module, registry):
        """register_transforms(registry) is invoked."""
        load_custom_transforms_from_module(str(custom_module), registry)

        assert registry.create("reverse").transform("abc") == "cba"

    def test_private_classes_skipped(self, custom_module, registry):
        """Underscore classes are not registered."""
        load_custom_transforms_from_module(str(custom_module), registry)

        assert "_hidden_transform" not in registry
        assert "hidden_transform" not in registry

    def test_builtins_not_replaced(self, temp_dir, registry):
        """Auto-registration never overwrites an existing name."""
        module_path = temp_dir / "upper_override.py"
        module_path.write_text(
            "class Upper:\n"
            "    def __init__(self, config):\n"
            "        pass\n"
            "\n"
            "    def transform(self, value):\n"
            "        return 'overridden'\n",
            encoding="utf-8",
        )

        load_custom_transforms_from_module(str(module_path), registry)

        assert registry.create("upper").transform("a") == "A"

    def test_hook_may_replace_builtins(self, temp_dir, registry):
        """Explicit registration in the hook wins over a built-in."""
        module_path = temp_dir / "replace_upper.py"
        module_path.write_text(
            "def register_transforms(registry):\n"
            "    registry.register('upper', lambda config: lambda value: value.upper() + '!')\n",
            encoding="utf-8",
        )

        load_custom_transforms_from_module(str(module_path), registry)

        assert registry.create("upper").transform("a") == "A!"

    def test_usable_in_chain(self, custom_module, registry):
        """Custom transforms compose with built-ins."""
        load_custom_transforms([str(custom_module)], registry)

        transform = build_transform(
            {"chain": [{"type": "trim"}, {"type": "reverse"}, {"type": "prefix_transform"}]},
            registry,
        )

        assert transform.transform(" abc ") == "PREFIX_cba"

    def test_dotted_module_path(self, registry):
        """Importable module names are accepted."""
        load_custom_transforms_from_module("fieldtransform.transforms.text", registry)

        assert "upper_transform" in registry
        assert "lower_transform" in registry

    def test_missing_file_raises(self, temp_dir, registry):
        """A missing file should raise TransformConfigError."""
        with pytest.raises(TransformConfigError) as exc_info:
            load_custom_transforms_from_module(str(temp_dir / "missing.py"), registry)

        assert "missing.py" in str(exc_info.value)

    def test_missing_module_raises(self, registry):
        """An unknown module name should raise TransformConfigError."""
        with pytest.raises(TransformConfigError):
            load_custom_transforms_from_module("no_such_module_for_transforms", registry)

    def test_syntax_error_raises(self, temp_dir, registry):
        """A module with invalid syntax should raise TransformConfigError."""
        module_path = temp_dir / "broken.py"
        module_path.write_text("def broken(:\n", encoding="utf-8")

        with pytest.raises(TransformConfigError):
            load_custom_transforms_from_module(str(module_path), registry)

    def test_module_runtime_error_raises(self, temp_dir, registry):
        """Any failure while the module executes should raise TransformConfigError."""
        module_path = temp_dir / "exploding.py"
        module_path.write_text("raise RuntimeError('not configured')\n", encoding="utf-8")

        with pytest.raises(TransformConfigError) as exc_info:
            load_custom_transforms_from_module(str(module_path), registry)

        assert "not configured" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestCamelToSnake:
    """Tests for class name conversion."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("PrefixTransform", "prefix_transform"),
            ("Upper", "upper"),
            ("slug", "slug"),
            ("HTTPCode", "h_t_t_p_code"),
        ],
    )
    def test_conversion(self, name, expected):
        assert _camel_to_snake(name) == expected
