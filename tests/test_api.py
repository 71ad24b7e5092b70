import pytest
from fastapi.testclient import TestClient

from search_mcp.main import create_app

from conftest import StubUpstream, make_settings


@pytest.fixture
def client(settings, upstream):
    return TestClient(create_app(settings, transport=upstream.transport))


def test_health_check(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "url-context-mcp" in response.json()["message"]


def test_list_tools(client):
    response = client.get("/v1/tools")
    assert response.status_code == 200
    names = [tool["name"] for tool in response.json()["tools"]]
    assert names == ["web_search", "local_pois", "local_descriptions", "rich_fetch"]


def test_call_tool(client, upstream):
    response = client.post("/v1/tools/call", json={"name": "local_pois", "arguments": {"ids": ["a", "b"]}})
    assert response.status_code == 200
    body = response.json()
    assert body["isError"] is False
    assert body["structuredContent"] == upstream.json_body
    assert upstream.last_request.url.query == b"ids=a&ids=b"


@pytest.mark.parametrize("payload, status, kind", [
    ({"name": "nonexistent_tool", "arguments": {}}, 404, "UnknownTool"),
    ({"name": "web_search", "arguments": {"query": "cats", "count": 21}}, 422, "ValidationFailed"),
    ({"name": "web_search"}, 422, "ValidationFailed"),
])
def test_call_tool_errors(client, upstream, payload, status, kind):
    response = client.post("/v1/tools/call", json=payload)
    assert response.status_code == status
    assert response.json()["error"]["kind"] == kind
    assert upstream.calls == 0


def test_missing_credential_is_service_unavailable(upstream):
    client = TestClient(create_app(make_settings(api_key=None), transport=upstream.transport))
    response = client.post("/v1/tools/call", json={"name": "rich_fetch", "arguments": {"callback_key": "k"}})
    assert response.status_code == 503
    assert response.json()["error"]["kind"] == "MissingCredential"
    assert upstream.calls == 0


def test_upstream_failure_is_bad_gateway():
    upstream = StubUpstream(status_code=500, text="boom")
    client = TestClient(create_app(make_settings(), transport=upstream.transport))
    response = client.post("/v1/tools/call", json={"name": "web_search", "arguments": {"query": "cats"}})
    assert response.status_code == 502
    error = response.json()["error"]
    assert error["status_code"] == 500
    assert error["body"] == "boom"
