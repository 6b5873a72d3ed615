import pytest

from ge2gg.pacts.types import ConvertContext


@pytest.fixture
def ctx():
    return ConvertContext()


def virtual_service(routes, name="vs", namespace="ns", domains=("a.com",), options=None):
    host = {"domains": list(domains), "routes": routes}
    if options is not None:
        host["options"] = options
    return {
        "apiVersion": "gateway.solo.io/v1",
        "kind": "VirtualService",
        "metadata": {"name": name, "namespace": namespace},
        "spec": {"virtualHost": host},
    }


def route_table(routes, name="rt", namespace="ns", options=None):
    spec = {"routes": routes}
    if options is not None:
        spec["options"] = options
    return {
        "apiVersion": "gateway.solo.io/v1",
        "kind": "RouteTable",
        "metadata": {"name": name, "namespace": namespace},
        "spec": spec,
    }


def kube_route(prefix="/x", options=None, svc="svc", namespace="ns", port=80):
    route = {
        "matchers": [{"prefix": prefix}],
        "routeAction": {"single": {"kube": {"ref": {"name": svc, "namespace": namespace},
                                            "port": port}}},
    }
    if options is not None:
        route["options"] = options
    return route
