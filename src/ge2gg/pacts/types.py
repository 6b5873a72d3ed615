"""Public data types for converters — the shared contracts."""

from dataclasses import dataclass, field


def _empty_option_hashes() -> dict[str, dict[str, str]]:
    return {"RouteOption": {}, "VirtualHostOption": {}}


@dataclass
class ConvertContext:
    """Per-run state passed to every translation call.

    option_hashes maps side-resource kind → {fingerprint: name}.
    side_resources accumulates RouteOption/VirtualHostOption manifests
    in first-creation order; the driver flushes them after all records.
    """
    config: dict = field(default_factory=dict)
    option_hashes: dict = field(default_factory=_empty_option_hashes)
    side_resources: list = field(default_factory=list)
    warnings: list = field(default_factory=list)


@dataclass
class ConvertResult:
    """Output of a conversion run — ordered manifests plus warnings."""
    resources: list = field(default_factory=list)
    warnings: list = field(default_factory=list)


class Converter:
    """Base class for legacy-kind converters."""
    name: str = ""
    kinds: list = []

    def convert(self, kind: str, manifest: dict, ctx: ConvertContext) -> dict:
        """Convert one manifest of a given kind. Override in subclasses."""
        raise NotImplementedError
