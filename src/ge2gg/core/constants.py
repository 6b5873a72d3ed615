"""Constants — API groups, kinds, side-resource naming."""

GATEWAY_API_GROUP = "gateway.networking.k8s.io"
GLOO_GROUP = "gloo.solo.io"
GLOO_GATEWAY_GROUP = "gateway.solo.io"

DEFAULT_HTTPROUTE_API_VERSION = f"{GATEWAY_API_GROUP}/v1beta1"
DEFAULT_OPTION_API_VERSION = f"{GLOO_GATEWAY_GROUP}/v1"

# Legacy kinds that produce an HTTPRoute
VIRTUAL_SERVICE = "VirtualService"
ROUTE_TABLE = "RouteTable"

# Side-resource kinds → name prefix
ROUTE_OPTION = "RouteOption"
VIRTUAL_HOST_OPTION = "VirtualHostOption"
SIDE_RESOURCE_PREFIXES = {
    ROUTE_OPTION: "route-option",
    VIRTUAL_HOST_OPTION: "virtualhost-option",
}

# Enclosing list kind flattened by the driver (kind + apiVersion must both match)
LIST_KIND = "List"
LIST_API_VERSION = "v1"

# Legacy matcher keys with a translation; anything else in this set is rejected
UNSUPPORTED_MATCHER_KEYS = ("connectMatcher",)

# Legacy destination variants without a backendRef equivalent
UNSUPPORTED_DESTINATION_KEYS = ("consul", "destinationSpec")

# routeAction variants carrying more than one destination (out of scope)
MULTI_DESTINATION_KEYS = ("multi", "upstreamGroup", "clusterHeader", "dynamicForwardProxy")

# Route actions that never produce backendRefs
NON_FORWARDING_ACTIONS = ("redirectAction", "directResponseAction")
