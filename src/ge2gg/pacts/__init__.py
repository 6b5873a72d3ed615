"""Public contracts for converters."""

from ge2gg.pacts.types import ConvertContext, ConvertResult, Converter
from ge2gg.pacts.errors import (
    ConversionError, StructuralError, UnsupportedShapeError,
    ManifestParseError, ConfigError,
)

__all__ = [
    "ConvertContext",
    "ConvertResult",
    "Converter",
    "ConversionError",
    "StructuralError",
    "UnsupportedShapeError",
    "ManifestParseError",
    "ConfigError",
]
