"""Route and host assembly — legacy routes → HTTPRoute rules and resources."""

from ge2gg.pacts.types import ConvertContext, Converter
from ge2gg.pacts.errors import ConversionError, StructuralError
from ge2gg.core.constants import (
    DEFAULT_HTTPROUTE_API_VERSION, GLOO_GATEWAY_GROUP, ROUTE_OPTION,
    VIRTUAL_HOST_OPTION, VIRTUAL_SERVICE, ROUTE_TABLE,
    MULTI_DESTINATION_KEYS, NON_FORWARDING_ACTIONS,
)
from ge2gg.core.matchers import (
    translate_matcher, translate_destination, translate_delegate,
)
from ge2gg.core.options import split_options
from ge2gg.core.dedup import get_or_create_side_resource


def _extension_ref(kind: str, name: str) -> dict:
    """ExtensionRef filter to a same-namespace side resource."""
    return {
        "type": "ExtensionRef",
        "extensionRef": {"group": GLOO_GATEWAY_GROUP, "kind": kind, "name": name},
    }


def _require_mapping(value, what: str) -> dict:
    if not isinstance(value, dict):
        raise StructuralError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


def _option_filters(options: dict, side_kind: str, namespace: str,
                    ctx: ConvertContext) -> list[dict]:
    """Native filters for *options*, plus an ExtensionRef for any residual."""
    _require_mapping(options, "options")
    filters, residual = split_options(options)
    if residual:
        name, _ = get_or_create_side_resource(side_kind, residual, namespace, ctx)
        filters.append(_extension_ref(side_kind, name))
    return filters


def _route_backend_refs(route: dict, namespace: str,
                        ctx: ConvertContext) -> list[dict] | None:
    """Resolve the rule's backendRefs; None when the route forwards nowhere."""
    # delegateAction wins over routeAction if both are (invalidly) set
    if route.get("delegateAction") is not None:
        label_order = ctx.config.get("selector_label_order", "declared")
        return [translate_delegate(route["delegateAction"], namespace, label_order)]
    action = route.get("routeAction")
    if action is not None:
        if action.get("single") is not None:
            return [translate_destination(action["single"])]
        variant = next((k for k in MULTI_DESTINATION_KEYS if k in action), None)
        if variant:
            ctx.warnings.append(
                f"routeAction.{variant} is not supported (single destination only) — "
                f"rule emitted without backendRefs")
            return None
        raise StructuralError("routeAction has no single destination")
    for action_key in NON_FORWARDING_ACTIONS:
        if action_key in route:
            ctx.warnings.append(
                f"{action_key} has no backendRef equivalent — rule emitted without backendRefs")
            break
    return None


def assemble_rule(route: dict, namespace: str, ctx: ConvertContext) -> dict:
    """Build one HTTPRoute rule from one legacy route.

    Each legacy matcher becomes one entry of ``matches`` (HTTPRoute ORs
    them). A route without matchers gets no ``matches`` key, so the
    HTTPRoute default (prefix /) applies.
    """
    _require_mapping(route, "route")
    rule = {}
    matchers = route.get("matchers")
    if matchers:
        if not isinstance(matchers, list):
            raise StructuralError("matchers must be a list")
        rule["matches"] = [translate_matcher(_require_mapping(m, "matcher")) for m in matchers]
    backend_refs = _route_backend_refs(route, namespace, ctx)
    if backend_refs is not None:
        rule["backendRefs"] = backend_refs
    if route.get("options") is not None:
        filters = _option_filters(route["options"], ROUTE_OPTION, namespace, ctx)
        if filters:
            rule["filters"] = filters
    return rule


def _record_identity(manifest: dict, ctx: ConvertContext) -> tuple[str, str]:
    """Return (name, namespace); a missing namespace falls back to the default."""
    kind = manifest.get("kind")
    meta = manifest.get("metadata") or {}
    if not isinstance(meta, dict):
        raise StructuralError("metadata must be a mapping", kind=kind)
    name = meta.get("name")
    if not name:
        raise StructuralError("metadata.name is missing", kind=kind,
                              namespace=meta.get("namespace"))
    namespace = meta.get("namespace")
    if not namespace:
        namespace = ctx.config.get("default_namespace", "default")
        ctx.warnings.append(
            f"{kind} '{name}' has no namespace — using '{namespace}'")
    return name, namespace


def assemble_host_resource(manifest: dict, ctx: ConvertContext) -> dict:
    """Build the HTTPRoute for a VirtualService or RouteTable manifest.

    Only VirtualServices carry ``hostnames``. Rule order follows route
    order. Host-level options become ``spec.filters``, with residuals
    externalized into a VirtualHostOption.
    """
    kind = manifest.get("kind")
    name, namespace = _record_identity(manifest, ctx)
    try:
        spec = manifest.get("spec")
        if spec is None:
            raise StructuralError("spec is missing")
        _require_mapping(spec, "spec")
        if kind == VIRTUAL_SERVICE:
            host = spec.get("virtualHost")
            if host is None:
                raise StructuralError("spec.virtualHost is missing")
            _require_mapping(host, "spec.virtualHost")
        else:
            host = spec
        routes = host.get("routes")
        if routes is None:
            raise StructuralError("routes are missing")
        if not isinstance(routes, list):
            raise StructuralError("routes must be a list")

        route_spec = {}
        if kind == VIRTUAL_SERVICE and host.get("domains") is not None:
            domains = host["domains"]
            if "*" in domains:
                ctx.warnings.append(
                    f"{kind} '{name}': wildcard domain '*' is not a valid HTTPRoute "
                    f"hostname — copied as is")
            route_spec["hostnames"] = domains
        route_spec["rules"] = [assemble_rule(r, namespace, ctx) for r in routes]
        if host.get("options") is not None:
            filters = _option_filters(host["options"], VIRTUAL_HOST_OPTION, namespace, ctx)
            if filters:
                route_spec["filters"] = filters
    except ConversionError as exc:
        exc.with_record(kind, name, namespace)
        raise
    except (AttributeError, TypeError) as exc:
        # a nested field of the wrong shape (e.g. a null header matcher)
        raise StructuralError(f"malformed field: {exc}", kind=kind, name=name,
                              namespace=namespace) from exc

    return {
        "apiVersion": ctx.config.get("httproute_api_version", DEFAULT_HTTPROUTE_API_VERSION),
        "kind": "HTTPRoute",
        "metadata": {"name": name, "namespace": namespace},
        "spec": route_spec,
    }


class VirtualServiceConverter(Converter):
    """VirtualService → HTTPRoute with hostnames from virtualHost.domains."""
    name = "virtualservice"
    kinds = [VIRTUAL_SERVICE]

    def convert(self, kind, manifest, ctx):
        return assemble_host_resource(manifest, ctx)


class RouteTableConverter(Converter):
    """RouteTable → HTTPRoute without hostnames (a delegation target)."""
    name = "routetable"
    kinds = [ROUTE_TABLE]

    def convert(self, kind, manifest, ctx):
        return assemble_host_resource(manifest, ctx)
