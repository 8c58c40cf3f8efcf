"""String-only transforms: upper, lower, trim."""

from collections.abc import Mapping
from typing import Any

from fieldtransform.core.exceptions import TypeConversionError
from fieldtransform.core.type_mapping import describe_type


class _StringOnlyTransform:
    name = ""

    def transform(self, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeConversionError(
                self.name,
                describe_type(value),
                f"{self.name} transform requires string input, got {describe_type(value)}",
            )
        return self._apply(value)

    def _apply(self, value: str) -> str:
        raise NotImplementedError


class UpperTransform(_StringOnlyTransform):
    """Upper-cases a string (Unicode-aware)."""

    name = "upper"

    def _apply(self, value: str) -> str:
        return value.upper()


class LowerTransform(_StringOnlyTransform):
    """Lower-cases a string (Unicode-aware)."""

    name = "lower"

    def _apply(self, value: str) -> str:
        return value.lower()


class TrimTransform(_StringOnlyTransform):
    """Strips leading and trailing whitespace."""

    name = "trim"

    def _apply(self, value: str) -> str:
        return value.strip()


def create_upper_transform(config: Mapping[str, Any] | None) -> UpperTransform:
    """Factory function for UpperTransform."""
    return UpperTransform()


def create_lower_transform(config: Mapping[str, Any] | None) -> LowerTransform:
    """Factory function for LowerTransform."""
    return LowerTransform()


def create_trim_transform(config: Mapping[str, Any] | None) -> TrimTransform:
    """Factory function for TrimTransform."""
    return TrimTransform()
