"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path

import pytest

from fieldtransform.transforms import new_registry


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry():
    """Fresh registry with only the built-in transforms."""
    return new_registry()


@pytest.fixture
def custom_module(temp_dir):
    """Write a custom transform module to disk and return its path."""
    module_path = temp_dir / "custom_transforms.py"
    module_path.write_text(
        '''
class PrefixTransform:
    def __init__(self, config):
        self.prefix = (config or {}).get("prefix", "PREFIX_")

    def transform(self, value):
        return self.prefix + value


class _HiddenTransform:
    def transform(self, value):
        return value


def register_transforms(registry):
    registry.register("reverse", lambda config: lambda value: value[::-1])
''',
        encoding="utf-8",
    )
    return module_path
