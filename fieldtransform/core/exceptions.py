"""Exception hierarchy for the fieldtransform package."""


class FieldTransformError(Exception):
    """Base exception for all fieldtransform errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class TransformError(FieldTransformError):
    """Raised when a transform cannot be created or applied."""

    pass


class UnknownTransformType(TransformError):
    """Raised when a registry is asked for a name it does not hold."""

    def __init__(self, transform_type: str, available_types: list[str] | None = None):
        available = ", ".join(available_types or []) or "(none)"
        super().__init__(
            f"Unknown transform type: '{transform_type}'",
            context={"transform_type": transform_type, "available_types": available},
        )
        self.transform_type = transform_type


class TypeConversionError(TransformError):
    """Raised when the input value's type is outside a transform's accepted set."""

    def __init__(self, transform: str, value_type: str, message: str | None = None):
        super().__init__(
            message or f"{transform} transform cannot convert {value_type}",
            context={"transform": transform, "value_type": value_type},
        )
        self.transform = transform
        self.value_type = value_type


class FormatParseError(TransformError):
    """Raised when a string fails to parse under the rule a transform requires."""

    def __init__(self, transform: str, value: str, error: str):
        super().__init__(
            f"{transform} transform cannot parse {value!r}",
            context={"transform": transform, "error": error},
        )
        self.transform = transform
        self.value = value
        self.error = error


class TransformConfigError(TransformError):
    """Raised when a transform configuration or field spec is invalid."""

    pass
