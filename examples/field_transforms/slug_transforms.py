"""Custom transforms for the orders example."""

from __future__ import annotations

import re
from typing import Any

from fieldtransform.core.exceptions import TypeConversionError
from fieldtransform.core.type_mapping import describe_type

_NON_WORD = re.compile(r"[^a-z0-9]+")


class SlugTransform:
    """Lowercase a string and collapse non-alphanumeric runs."""

    name = "slug"

    def __init__(self, config: dict[str, Any] | None = None):
        self.separator = (config or {}).get("separator", "-")

    def transform(self, value: Any) -> Any:
        if not isinstance(value, str):
            raise TypeConversionError(self.name, describe_type(value))
        return _NON_WORD.sub(self.separator, value.lower()).strip(self.separator)


class InitialsTransform:
    """Keep the first letter of each word."""

    def __init__(self, config: dict[str, Any] | None = None):
        pass

    def transform(self, value: Any) -> Any:
        if not isinstance(value, str):
            raise TypeConversionError("initials", describe_type(value))
        return "".join(word[0].upper() for word in value.split())


def register_transforms(registry):
    registry.register("slug", SlugTransform)
