import re

from ge2gg.core.dedup import fingerprint, get_or_create_side_resource


def test_same_payload_any_key_order_is_one_resource(ctx):
    first = {"timeout": "5s", "retries": {"numRetries": 3, "retryOn": "5xx"}}
    second = {"retries": {"retryOn": "5xx", "numRetries": 3}, "timeout": "5s"}

    name1, new1 = get_or_create_side_resource("RouteOption", first, "ns", ctx)
    name2, new2 = get_or_create_side_resource("RouteOption", second, "ns", ctx)

    assert name1 == name2
    assert (new1, new2) == (True, False)
    assert len(ctx.side_resources) == 1
    assert len(ctx.option_hashes["RouteOption"]) == 1


def test_name_format_and_manifest(ctx):
    name, _ = get_or_create_side_resource("RouteOption", {"timeout": "5s"}, "ns", ctx)
    assert re.fullmatch(r"route-option-[0-9a-f]{8}", name)
    assert name == "route-option-" + fingerprint({"timeout": "5s"}, "ns")[:8]
    assert ctx.side_resources == [{
        "apiVersion": "gateway.solo.io/v1",
        "kind": "RouteOption",
        "metadata": {"name": name, "namespace": "ns"},
        "spec": {"timeout": "5s"},
    }]


def test_virtual_host_option_prefix(ctx):
    name, _ = get_or_create_side_resource("VirtualHostOption", {"cors": {}}, "ns", ctx)
    assert re.fullmatch(r"virtualhost-option-[0-9a-f]{8}", name)
    assert ctx.side_resources[0]["kind"] == "VirtualHostOption"


def test_namespace_changes_name(ctx):
    a, _ = get_or_create_side_resource("RouteOption", {"timeout": "5s"}, "ns1", ctx)
    b, _ = get_or_create_side_resource("RouteOption", {"timeout": "5s"}, "ns2", ctx)
    assert a != b
    assert len(ctx.side_resources) == 2


def test_values_change_name(ctx):
    a, _ = get_or_create_side_resource("RouteOption", {"timeout": "5s"}, "ns", ctx)
    b, _ = get_or_create_side_resource("RouteOption", {"timeout": "6s"}, "ns", ctx)
    c, _ = get_or_create_side_resource("RouteOption", {"idleTimeout": "5s"}, "ns", ctx)
    assert len({a, b, c}) == 3


def test_kinds_have_separate_registries(ctx):
    get_or_create_side_resource("RouteOption", {"cors": {}}, "ns", ctx)
    _, is_new = get_or_create_side_resource("VirtualHostOption", {"cors": {}}, "ns", ctx)
    assert is_new
    assert [r["kind"] for r in ctx.side_resources] == ["RouteOption", "VirtualHostOption"]


def test_option_api_version_from_config(ctx):
    ctx.config["option_api_version"] = "gateway.solo.io/v2"
    get_or_create_side_resource("RouteOption", {"cors": {}}, "ns", ctx)
    assert ctx.side_resources[0]["apiVersion"] == "gateway.solo.io/v2"


def test_fingerprint_is_stable_hex():
    digest = fingerprint({"b": [1, {"y": 2, "x": 1}], "a": None}, "ns")
    assert digest == fingerprint({"a": None, "b": [1, {"x": 1, "y": 2}]}, "ns")
    assert re.fullmatch(r"[0-9a-f]{32}", digest)


def test_list_order_is_significant():
    assert fingerprint({"a": [1, 2]}, "ns") != fingerprint({"a": [2, 1]}, "ns")
