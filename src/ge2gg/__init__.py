"""ge2gg — convert Gloo Edge routing manifests to Gateway API HTTPRoutes.

Re-exports the public API.
"""

from ge2gg.pacts.types import ConvertContext, ConvertResult, Converter
from ge2gg.pacts.errors import (
    ConversionError, StructuralError, UnsupportedShapeError,
    ManifestParseError, ConfigError,
)
from ge2gg.core.matchers import (
    translate_matcher, translate_destination, translate_delegate,
)
from ge2gg.core.options import OPTION_FILTERS, split_options
from ge2gg.core.dedup import fingerprint, get_or_create_side_resource
from ge2gg.core.routes import (
    assemble_rule, assemble_host_resource,
    VirtualServiceConverter, RouteTableConverter,
)
from ge2gg.core.convert import convert, flatten_records
from ge2gg.io.parsing import parse_manifest_stream, load_manifests
from ge2gg.io.output import serialize_record, serialize_stream, write_manifests
from ge2gg.io.config import load_config

__all__ = [
    # Types & base classes
    "ConvertContext",
    "ConvertResult",
    "Converter",
    "VirtualServiceConverter",
    "RouteTableConverter",
    # Errors
    "ConversionError",
    "StructuralError",
    "UnsupportedShapeError",
    "ManifestParseError",
    "ConfigError",
    # Translation engine
    "translate_matcher",
    "translate_destination",
    "translate_delegate",
    "OPTION_FILTERS",
    "split_options",
    "fingerprint",
    "get_or_create_side_resource",
    "assemble_rule",
    "assemble_host_resource",
    "convert",
    "flatten_records",
    # I/O
    "parse_manifest_stream",
    "load_manifests",
    "serialize_record",
    "serialize_stream",
    "write_manifests",
    "load_config",
]
