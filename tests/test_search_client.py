import httpx
import pytest

from search_mcp.models.common import ErrorKind, InvocationError
from search_mcp.services.search_client import SearchClient, encode_params

from conftest import StubUpstream, make_settings


def test_encode_params_drops_absent_and_empty_values():
    assert encode_params([("q", "cats"), ("count", None), ("country", ""), ("offset", 0)]) == [
        ("q", "cats"),
        ("offset", "0"),
    ]


def test_encode_params_keeps_repeated_keys_in_order():
    assert encode_params([("ids", "b"), ("ids", "a")]) == [("ids", "b"), ("ids", "a")]


def test_endpoint_joins_base_url():
    client = SearchClient(make_settings(SEARCH_MCP_BASE_URL="https://example.test/res/v1/"))
    assert client.endpoint("/web/search") == "https://example.test/res/v1/web/search"


@pytest.mark.asyncio
async def test_fetch_json_sends_provider_headers(upstream):
    client = SearchClient(make_settings(), transport=upstream.transport)
    payload = await client.fetch_json(client.endpoint("web/search"), [("q", "cats")])

    assert payload == upstream.json_body
    request = upstream.last_request
    assert request.method == "GET"
    assert request.headers["accept"] == "application/json"
    assert request.headers["accept-encoding"] == "gzip"
    assert request.headers["x-subscription-token"] == "test-key"
    assert request.url.path == "/res/v1/web/search"
    assert request.url.query == b"q=cats"


@pytest.mark.asyncio
async def test_repeated_ids_are_not_comma_joined(upstream):
    client = SearchClient(make_settings(), transport=upstream.transport)
    await client.fetch_json(client.endpoint("local/pois"), [("ids", "a"), ("ids", "b")])

    assert upstream.last_request.url.query == b"ids=a&ids=b"
    assert upstream.last_request.url.params.get_list("ids") == ["a", "b"]


@pytest.mark.asyncio
async def test_each_id_is_url_encoded_independently(upstream):
    client = SearchClient(make_settings(), transport=upstream.transport)
    await client.fetch_json(client.endpoint("local/pois"), [("ids", "a&b"), ("ids", "c=d")])

    assert upstream.last_request.url.params.get_list("ids") == ["a&b", "c=d"]


@pytest.mark.asyncio
@pytest.mark.parametrize("api_key", [None, ""])
async def test_missing_credential_never_touches_network(upstream, api_key):
    client = SearchClient(make_settings(api_key=api_key), transport=upstream.transport)
    result = await client.fetch_json(client.endpoint("web/search"), [("q", "cats")])

    assert isinstance(result, InvocationError)
    assert result.kind is ErrorKind.MISSING_CREDENTIAL
    assert "SEARCH_MCP_API_KEY" in result.message
    assert upstream.calls == 0


@pytest.mark.asyncio
async def test_non_success_status_keeps_raw_body():
    upstream = StubUpstream(status_code=429, text='{"error": "rate limited"')
    client = SearchClient(make_settings(), transport=upstream.transport)
    result = await client.fetch_json(client.endpoint("web/search"), [("q", "cats")])

    assert isinstance(result, InvocationError)
    assert result.kind is ErrorKind.UPSTREAM_FAILURE
    assert result.status_code == 429
    assert result.body == '{"error": "rate limited"'
    assert upstream.calls == 1


@pytest.mark.asyncio
async def test_transport_error_is_an_upstream_failure():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = SearchClient(make_settings(), transport=httpx.MockTransport(refuse))
    result = await client.fetch_json(client.endpoint("web/search"), [("q", "cats")])

    assert isinstance(result, InvocationError)
    assert result.kind is ErrorKind.UPSTREAM_FAILURE
    assert result.status_code is None
    assert result.cause == "ConnectError"


@pytest.mark.asyncio
async def test_invalid_json_body_is_an_upstream_failure():
    upstream = StubUpstream(status_code=200, text="<html>not json</html>")
    client = SearchClient(make_settings(), transport=upstream.transport)
    result = await client.fetch_json(client.endpoint("web/search"), [("q", "cats")])

    assert isinstance(result, InvocationError)
    assert result.kind is ErrorKind.UPSTREAM_FAILURE
    assert result.status_code == 200
    assert result.body == "<html>not json</html>"


@pytest.mark.asyncio
async def test_payload_is_returned_verbatim():
    body = {"type": "search", "query": {"original": "cats"}, "extra": [1, None, {"nested": True}]}
    upstream = StubUpstream(json_body=body)
    client = SearchClient(make_settings(), transport=upstream.transport)

    assert await client.fetch_json(client.endpoint("web/search"), [("q", "cats")]) == body
