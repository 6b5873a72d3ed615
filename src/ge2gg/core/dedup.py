"""Side-resource deduplication — fingerprints and the per-run registry.

A residual options payload is fingerprinted as MD5 over its canonical JSON
(keys sorted recursively, compact separators) followed by the namespace.
Equal payloads in the same namespace therefore share one side resource,
regardless of key order in the source document.
"""

import hashlib
import json

from ge2gg.pacts.types import ConvertContext
from ge2gg.core.constants import (
    DEFAULT_OPTION_API_VERSION, SIDE_RESOURCE_PREFIXES,
)


def canonical_json(payload) -> str:
    """Serialize *payload* with sorted keys so that key order is irrelevant."""
    return json.dumps(payload, sort_keys=True, separators=(",", ":"),
                      ensure_ascii=False, default=str)


def fingerprint(payload, namespace: str) -> str:
    """Return the hex digest identifying (payload, namespace)."""
    data = (canonical_json(payload) + namespace).encode("utf-8")
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def _side_resource(kind: str, name: str, namespace: str, spec: dict,
                   api_version: str) -> dict:
    return {
        "apiVersion": api_version,
        "kind": kind,
        "metadata": {"name": name, "namespace": namespace},
        "spec": spec,
    }


def get_or_create_side_resource(kind: str, residual: dict, namespace: str,
                                ctx: ConvertContext) -> tuple[str, bool]:
    """Return (name, is_new) for the side resource carrying *residual*.

    The first sight of a fingerprint registers its name in
    ctx.option_hashes[kind] and appends the manifest to ctx.side_resources.
    Later sights only read the registry.
    """
    registry = ctx.option_hashes.setdefault(kind, {})
    digest = fingerprint(residual, namespace)
    if digest in registry:
        return registry[digest], False
    name = f"{SIDE_RESOURCE_PREFIXES[kind]}-{digest[:8]}"
    registry[digest] = name
    api_version = ctx.config.get("option_api_version", DEFAULT_OPTION_API_VERSION)
    ctx.side_resources.append(
        _side_resource(kind, name, namespace, residual, api_version))
    return name, True
