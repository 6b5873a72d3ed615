"""Conversion error hierarchy."""


class ConversionError(Exception):
    """Base error for a failed run. Carries the offending record, if known."""

    def __init__(self, message: str, kind: str | None = None,
                 name: str | None = None, namespace: str | None = None):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.name = name
        self.namespace = namespace

    def with_record(self, kind: str, name: str | None,
                    namespace: str | None) -> "ConversionError":
        """Attach record context unless an inner call already did."""
        if self.kind is None:
            self.kind, self.name, self.namespace = kind, name, namespace
        return self

    def __str__(self) -> str:
        if self.kind is None:
            return self.message
        return f"{self.kind} {self.namespace or '?'}/{self.name or '?'}: {self.message}"


class StructuralError(ConversionError):
    """A required nested field is missing on a record the engine reads."""


class UnsupportedShapeError(ConversionError):
    """A recognized legacy variant that has no translation."""


class ManifestParseError(ConversionError):
    """The input stream is not valid YAML or holds a non-mapping document."""


class ConfigError(ConversionError):
    """The config file is unreadable or holds an invalid value."""
