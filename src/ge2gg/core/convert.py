"""Main conversion orchestration — flattening, dispatch by kind, output order."""

from ge2gg.pacts.types import ConvertContext, ConvertResult
from ge2gg.pacts.errors import ConversionError, StructuralError
from ge2gg.core.constants import LIST_KIND, LIST_API_VERSION
from ge2gg.core.routes import VirtualServiceConverter, RouteTableConverter

# Converter instances — kinds not claimed here are skipped silently
_CONVERTERS = [VirtualServiceConverter(), RouteTableConverter()]


def _converters_by_kind(converters) -> dict:
    """Index converters by the kinds they claim. Fails on duplicate claims."""
    by_kind = {}
    for c in converters:
        for k in c.kinds:
            if k in by_kind:
                raise ConversionError(
                    f"kind '{k}' claimed by both converters '{by_kind[k].name}' "
                    f"and '{c.name}'")
            by_kind[k] = c
    return by_kind


def flatten_records(documents: list) -> list[dict]:
    """Expand v1 List wrappers one level, keeping item order. Drops null documents."""
    records = []
    for doc in documents:
        if doc is None:
            continue
        if (isinstance(doc, dict) and doc.get("kind") == LIST_KIND
                and doc.get("apiVersion") == LIST_API_VERSION
                and isinstance(doc.get("items"), list)):
            records.extend(item for item in doc["items"] if item is not None)
        else:
            records.append(doc)
    return records


def convert(documents: list, config: dict | None = None,
            converters=None) -> ConvertResult:
    """Convert legacy records into HTTPRoutes followed by side resources.

    Output order: one HTTPRoute per VirtualService/RouteTable in input
    order, then every RouteOption/VirtualHostOption in first-creation
    order. Each call owns a fresh ConvertContext, so registries never leak
    between runs.
    """
    ctx = ConvertContext(config=dict(config or {}))
    by_kind = _converters_by_kind(_CONVERTERS if converters is None else converters)

    resources: list[dict] = []
    for record in flatten_records(documents):
        if not isinstance(record, dict):
            raise StructuralError(f"record is not a mapping ({type(record).__name__})")
        kind = record.get("kind")
        converter = by_kind.get(kind)
        if converter is None:
            continue
        resources.append(converter.convert(kind, record, ctx))

    resources.extend(ctx.side_resources)
    return ConvertResult(resources=resources, warnings=ctx.warnings)
