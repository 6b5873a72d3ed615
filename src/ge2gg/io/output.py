"""Output writing — manifest serialization, warnings."""

import sys

import yaml

DOCUMENT_SEPARATOR = "---\n"


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that never emits anchors for shared objects."""

    def ignore_aliases(self, data):
        return True


def serialize_record(record: dict) -> str:
    """Dump one manifest as YAML, keeping key insertion order."""
    return yaml.dump(record, Dumper=_NoAliasDumper, default_flow_style=False,
                     sort_keys=False, allow_unicode=True)


def serialize_stream(records: list[dict]) -> str:
    """Dump manifests joined by document separators."""
    return DOCUMENT_SEPARATOR.join(serialize_record(r) for r in records)


def write_manifests(records: list[dict], path: str) -> None:
    """Write the converted manifest stream."""
    with open(path, "w", encoding="utf-8") as f:
        f.write(serialize_stream(records))
    print(f"Wrote {path} ({len(records)} manifest(s))", file=sys.stderr)


def emit_warnings(warnings: list[str]) -> None:
    """Print all warnings to stderr."""
    for w in warnings:
        print(f"⚠ {w}", file=sys.stderr)
