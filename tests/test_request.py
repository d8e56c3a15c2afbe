import json

import pytest

from cogwire.request import (
    Ping,
    RequestError,
    ServiceRequest,
    Shutdown,
    payload_from_dict,
    payload_to_dict,
    service_catalog,
)
from cogwire.schema import Feature


def compact(data):
    return json.dumps(data, separators=(",", ":"))


def test_ping_roundtrip():
    wire = payload_to_dict(Ping())
    assert '"type":"ping"' in compact(wire)
    assert payload_from_dict(wire) == Ping()


def test_shutdown_roundtrip():
    wire = payload_to_dict(Shutdown("user requested"))
    text = compact(wire)
    assert '"type":"shutdown"' in text
    assert "user requested" in text
    assert payload_from_dict(wire) == Shutdown("user requested")


def test_shutdown_without_reason_omits_key():
    assert payload_to_dict(Shutdown()) == {"type": "shutdown"}


def test_shutdown_non_string_reason_is_dropped():
    assert payload_from_dict({"type": "shutdown", "reason": 5}) == Shutdown(None)


def test_auth_login_type_string():
    payload = ServiceRequest(
        "auth",
        "login",
        {"email": "test@example.com", "services": ["gmail"], "readonly": False, "manual": False},
    )
    text = compact(payload_to_dict(payload))
    assert '"type":"auth.login"' in text
    assert "test@example.com" in text
    assert '"op"' not in text

    parsed = payload_from_dict(json.loads(text))
    assert isinstance(parsed, ServiceRequest)
    assert (parsed.service, parsed.op) == ("auth", "login")


def test_gmail_search_type_string():
    payload = ServiceRequest("gmail", "search", {"query": "from:alice", "max": 10})
    text = compact(payload_to_dict(payload))
    assert '"type":"gmail.search"' in text
    assert "from:alice" in text
    assert '"op"' not in text

    parsed = payload_from_dict(json.loads(text))
    assert parsed == ServiceRequest("gmail", "search", {"query": "from:alice", "max": 10})


def test_monitor_subscribe_type_string():
    payload = ServiceRequest(
        "monitor", "subscribe", {"services": ["gmail", "drive"], "interval_secs": 30}
    )
    wire = payload_to_dict(payload)
    assert '"type":"monitor.subscribe"' in compact(wire)
    assert wire == {
        "type": "monitor.subscribe",
        "services": ["gmail", "drive"],
        "interval_secs": 30,
    }


def test_type_key_comes_first():
    wire = payload_to_dict(ServiceRequest("drive", "get", {"file_id": "f1"}))
    assert list(wire) == ["type", "file_id"]


def test_defaults_filled_on_decode():
    parsed = payload_from_dict({"type": "auth.login", "email": "a@example.com"})
    assert parsed.params == {
        "email": "a@example.com",
        "services": [],
        "readonly": False,
        "manual": False,
    }


def test_index_query_keeps_null_max_results():
    wire = payload_to_dict(
        ServiceRequest("index", "query", {"namespace": "gmail", "query": "x"})
    )
    assert wire == {
        "type": "index.query",
        "namespace": "gmail",
        "query": "x",
        "max_results": None,
    }


def test_monitor_subscribe_requires_services():
    with pytest.raises(RequestError, match="missing field `services`"):
        payload_from_dict({"type": "monitor.subscribe"})


def test_unknown_service():
    with pytest.raises(RequestError, match="unknown service: nope"):
        payload_from_dict({"type": "nope.get"})


def test_type_without_dot_is_invalid():
    with pytest.raises(RequestError, match="invalid request type: gmail"):
        payload_from_dict({"type": "gmail"})


def test_missing_type():
    with pytest.raises(RequestError, match="missing field `type`"):
        payload_from_dict({"query": "x"})


def test_non_object_rejected():
    with pytest.raises(RequestError):
        payload_from_dict([1, 2])


def test_unknown_operation_reports_service():
    with pytest.raises(RequestError, match=r"invalid gmail\.\* request"):
        payload_from_dict({"type": "gmail.explode"})


def test_destructive_operation_needs_feature():
    with pytest.raises(RequestError):
        payload_from_dict({"type": "drive.empty_trash"})
    parsed = payload_from_dict(
        {"type": "drive.empty_trash"}, features=[Feature.DESTRUCTIVE_PERMANENT]
    )
    assert parsed == ServiceRequest("drive", "empty_trash", {})


def test_gemini_needs_feature():
    data = {"type": "gemini.get_conversation", "conversation_id": "c1"}
    with pytest.raises(RequestError, match="unknown service: gemini"):
        payload_from_dict(data)
    parsed = payload_from_dict(data, features=[Feature.GEMINI_WEB])
    assert parsed.params == {"conversation_id": "c1"}


def test_catalog_gating():
    assert "gemini" not in service_catalog()
    assert "notebooklm" not in service_catalog()
    full = service_catalog(Feature)
    assert {"gemini", "notebooklm", "auth", "monitor", "index", "gmail"} <= set(full)


def test_encode_invalid_params_raises():
    with pytest.raises(RequestError, match="missing field `query`"):
        payload_to_dict(ServiceRequest("gmail", "search", {}))


def test_encode_unknown_service_raises():
    with pytest.raises(RequestError, match="unknown service: bogus"):
        payload_to_dict(ServiceRequest("bogus", "get", {}))