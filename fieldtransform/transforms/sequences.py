"""Split and join transforms over string sequences."""

from collections.abc import Mapping
from typing import Any

from fieldtransform.core.exceptions import TypeConversionError
from fieldtransform.core.type_mapping import (
    ValueKind,
    describe_type,
    kind_of,
    to_canonical_string,
)
from fieldtransform.transforms.registry import string_option

DEFAULT_DELIMITER = ","


class SplitTransform:
    """Splits a string on a literal delimiter.

    Config:
        delimiter: str - literal separator (default ","); an empty delimiter
                   splits the string into its characters
    """

    name = "split"

    def __init__(self, config: Mapping[str, Any] | None = None):
        self.delimiter = string_option(config, "delimiter", DEFAULT_DELIMITER, self.name)

    def transform(self, value: Any) -> list[str]:
        if kind_of(value) != ValueKind.STRING:
            raise TypeConversionError(
                self.name,
                describe_type(value),
                f"split transform requires string input, got {describe_type(value)}",
            )
        if not self.delimiter:
            return list(value)
        return value.split(self.delimiter)

    def __repr__(self) -> str:
        return f"SplitTransform(delimiter={self.delimiter!r})"


class JoinTransform:
    """Joins a sequence into a string.

    Each element is rendered with its canonical string form before joining.

    Config:
        delimiter: str - separator placed between elements (default ",")
    """

    name = "join"

    def __init__(self, config: Mapping[str, Any] | None = None):
        self.delimiter = string_option(config, "delimiter", DEFAULT_DELIMITER, self.name)

    def transform(self, value: Any) -> str:
        if kind_of(value) != ValueKind.SEQUENCE:
            raise TypeConversionError(
                self.name,
                describe_type(value),
                f"join transform requires sequence input, got {describe_type(value)}",
            )
        return self.delimiter.join(to_canonical_string(item) for item in value)

    def __repr__(self) -> str:
        return f"JoinTransform(delimiter={self.delimiter!r})"


def create_split_transform(config: Mapping[str, Any] | None) -> SplitTransform:
    """Factory function for SplitTransform."""
    return SplitTransform(config)


def create_join_transform(config: Mapping[str, Any] | None) -> JoinTransform:
    """Factory function for JoinTransform."""
    return JoinTransform(config)
