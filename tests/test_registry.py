from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from tidio_mcp.registry import (
    TOOL_HANDLERS,
    TOOLS,
    check_registry,
    dispatch,
    list_tool_descriptors,
    render,
)

from conftest import json_response


def _call(client, name, arguments=None) -> str:
    result = asyncio.run(dispatch(client, name, arguments))
    content = render(result)
    assert len(content) == 1
    assert content[0].type == "text"
    return content[0].text


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request to {request.url}")


def test_catalog_and_handlers_match_both_ways() -> None:
    names = [tool.name for tool in list_tool_descriptors()]

    assert names == [
        "get_contacts",
        "get_contact_messages",
        "get_operators",
        "search_contacts",
        "get_tickets",
        "get_ticket_details",
    ]
    assert set(names) == set(TOOL_HANDLERS)


def test_every_listed_tool_is_dispatchable(make_client) -> None:
    client, _ = make_client(lambda request: json_response({"ok": True}))

    for tool in list_tool_descriptors():
        arguments = {arg: "1" for arg in tool.inputSchema.get("required", [])}
        text = _call(client, tool.name, arguments)
        assert not text.startswith("Error: Unknown tool")


def test_check_registry_rejects_mismatch() -> None:
    handlers = dict(TOOL_HANDLERS)
    handlers.pop("get_operators")

    with pytest.raises(RuntimeError, match="get_operators"):
        check_registry(TOOLS, handlers)

    handlers = dict(TOOL_HANDLERS, delete_contact=TOOL_HANDLERS["get_contacts"])
    with pytest.raises(RuntimeError, match="delete_contact"):
        check_registry(TOOLS, handlers)


def test_unknown_tool_is_reported_without_network_call(make_client) -> None:
    client, transport = make_client(_unreachable)

    assert _call(client, "delete_everything", {}) == "Error: Unknown tool: delete_everything"
    assert transport.requests == []


@pytest.mark.parametrize(
    ("tool_name", "argument"),
    [("get_contact_messages", "contact_id"), ("get_ticket_details", "ticket_id")],
)
def test_missing_required_argument(make_client, tool_name: str, argument: str) -> None:
    client, transport = make_client(_unreachable)

    assert _call(client, tool_name, {}) == f"Error: {argument} is required"
    assert _call(client, tool_name, None) == f"Error: {argument} is required"
    assert _call(client, tool_name, {argument: ""}) == f"Error: {argument} is required"
    assert transport.requests == []


def test_get_contacts_without_arguments_sends_no_query(make_client) -> None:
    client, transport = make_client(lambda request: json_response({"contacts": []}))

    _call(client, "get_contacts", {})

    assert transport.requests[0].url.path == "/contacts"
    assert transport.requests[0].url.query == b""


def test_get_contacts_passes_limit_and_cursor(make_client) -> None:
    client, transport = make_client(lambda request: json_response({"contacts": []}))

    _call(client, "get_contacts", {"limit": 10, "cursor": "abc"})

    assert dict(transport.requests[0].url.params) == {"limit": "10", "cursor": "abc"}


def test_get_contact_messages_builds_path_and_limit(make_client) -> None:
    client, transport = make_client(lambda request: json_response({"messages": []}))

    _call(client, "get_contact_messages", {"contact_id": "c-1", "limit": 25})

    sent = transport.requests[0]
    assert sent.url.path == "/contacts/c-1/messages"
    assert dict(sent.url.params) == {"limit": "25"}


def test_get_operators_has_no_parameters(make_client) -> None:
    client, transport = make_client(lambda request: json_response({"operators": []}))

    _call(client, "get_operators", {"ignored": "x"})

    assert transport.requests[0].url.path == "/operators"
    assert transport.requests[0].url.query == b""


def test_get_tickets_passes_status_and_limit(make_client) -> None:
    client, transport = make_client(lambda request: json_response({"tickets": []}))

    _call(client, "get_tickets", {"status": "open", "limit": 5})

    assert transport.requests[0].url.path == "/tickets"
    assert dict(transport.requests[0].url.params) == {"status": "open", "limit": "5"}


def test_successful_calls_pass_payload_through(make_client) -> None:
    payload = {"ticket": {"id": 7, "subject": "Zwrot", "tags": ["vip", "ünïcode"]}, "meta": None}
    client, transport = make_client(lambda request: json_response(payload))

    text = _call(client, "get_ticket_details", {"ticket_id": 7})

    assert transport.requests[0].url.path == "/tickets/7"
    assert json.loads(text) == payload
    assert text == json.dumps(payload, indent=2, ensure_ascii=False)


def test_upstream_404_renders_as_error_text(make_client) -> None:
    client, _ = make_client(lambda request: json_response({"error": "not found"}, status_code=404))

    text = _call(client, "get_ticket_details", {"ticket_id": "missing"})

    assert text == 'Error: API Error 404: Not Found - {"error":"not found"}'


def test_transport_failure_renders_as_error_text(make_client) -> None:
    def _timeout(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    client, _ = make_client(_timeout)

    assert _call(client, "get_operators") == "Error: Tidio API request failed: timed out"


def test_unexpected_handler_failure_is_contained(make_client, monkeypatch) -> None:
    async def _broken(client, arguments):
        raise RuntimeError("handler blew up")

    monkeypatch.setitem(TOOL_HANDLERS, "get_operators", _broken)
    client, _ = make_client(_unreachable)

    assert _call(client, "get_operators", {}) == "Error: handler blew up"
