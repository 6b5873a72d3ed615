"""Matcher, destination and delegate translation."""

from ge2gg.pacts.errors import StructuralError, UnsupportedShapeError
from ge2gg.core.constants import (
    GATEWAY_API_GROUP, GLOO_GROUP, UNSUPPORTED_MATCHER_KEYS,
    UNSUPPORTED_DESTINATION_KEYS,
)

# Legacy path field → HTTPRoute path match type, in priority order
_PATH_TYPES = (
    ("prefix", "PathPrefix"),
    ("exact", "Exact"),
    ("regex", "RegularExpression"),
)


def _value_matches(entries: list[dict]) -> list[dict]:
    """Translate header or query-parameter matchers (name/value/regex)."""
    return [{
        "name": entry.get("name"),
        "type": "RegularExpression" if entry.get("regex") else "Exact",
        "value": entry.get("value"),
    } for entry in entries]


def translate_matcher(matcher: dict) -> dict:
    """Translate one legacy matcher into an HTTPRoute match.

    Absent legacy fields stay absent. The first non-empty path field wins:
    prefix over exact, exact over regex.
    """
    for key in UNSUPPORTED_MATCHER_KEYS:
        if key in matcher:
            raise UnsupportedShapeError(f"matcher variant '{key}' has no HTTPRoute equivalent")
    match = {}
    for legacy_key, path_type in _PATH_TYPES:
        if matcher.get(legacy_key):
            match["path"] = {"type": path_type, "value": matcher[legacy_key]}
            break
    if matcher.get("headers") is not None:
        match["headers"] = _value_matches(matcher["headers"])
    if matcher.get("methods") is not None:
        match["method"] = list(matcher["methods"])
    if matcher.get("queryParameters") is not None:
        match["queryParams"] = _value_matches(matcher["queryParameters"])
    return match


def translate_destination(destination: dict) -> dict:
    """Translate a single-destination routeAction into a backendRef."""
    if destination.get("upstream") is not None:
        upstream = destination["upstream"]
        return {
            "group": GLOO_GROUP,
            "kind": "Upstream",
            "name": upstream.get("name"),
            "namespace": upstream.get("namespace"),
        }
    if destination.get("kube") is not None:
        kube = destination["kube"]
        ref = kube.get("ref")
        if ref is None:
            raise StructuralError("kube destination has no ref")
        return {
            "name": ref.get("name"),
            "namespace": ref.get("namespace"),
            "port": kube.get("port"),
        }
    for key in UNSUPPORTED_DESTINATION_KEYS:
        if key in destination:
            raise UnsupportedShapeError(f"destination variant '{key}' has no backendRef equivalent")
    raise StructuralError("single destination has neither upstream nor kube")


def _selector_delegate_name(labels: dict, label_order: str) -> str:
    """Synthesize a delegate HTTPRoute name from selector label values."""
    keys = sorted(labels) if label_order == "sorted" else list(labels)
    return "delegate-" + "-".join(str(labels[k]) for k in keys)


def translate_delegate(delegate: dict, default_namespace: str,
                       label_order: str = "declared") -> dict:
    """Translate a delegateAction into a backendRef to the child HTTPRoute.

    The ref form uses ref.name/ref.namespace; the deprecated flat form
    (name/namespace directly on the action) is read the same way. The
    selector form joins label values (see *label_order*) and takes the
    first candidate namespace.
    """
    if delegate.get("ref") is not None:
        ref = delegate["ref"]
        if not ref.get("name"):
            raise StructuralError("delegateAction.ref has no name")
        name = ref["name"]
        namespace = ref.get("namespace") or default_namespace
    elif delegate.get("selector") is not None:
        selector = delegate["selector"]
        name = _selector_delegate_name(selector.get("labels") or {}, label_order)
        namespaces = selector.get("namespaces") or []
        namespace = namespaces[0] if namespaces and namespaces[0] else default_namespace
    elif delegate.get("name"):
        name = delegate["name"]
        namespace = delegate.get("namespace") or default_namespace
    else:
        raise StructuralError("delegateAction has neither ref nor selector")
    return {
        "group": GATEWAY_API_GROUP,
        "kind": "HTTPRoute",
        "name": name,
        "namespace": namespace,
    }
