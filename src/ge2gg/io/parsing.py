"""Manifest parsing — YAML multi-document loading."""

import yaml

from ge2gg.pacts.errors import ManifestParseError


def parse_manifest_stream(text: str) -> list:
    """Load every document of a YAML stream, in order.

    Null documents are kept (the driver drops them); any other
    non-mapping document fails the run.
    """
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"invalid YAML: {exc}") from exc
    for index, doc in enumerate(documents):
        if doc is not None and not isinstance(doc, dict):
            raise ManifestParseError(
                f"document #{index + 1} is a {type(doc).__name__}, expected a mapping")
    return documents


def load_manifests(path: str) -> list:
    """Read and parse a manifest file."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise ManifestParseError(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    return parse_manifest_stream(text)
