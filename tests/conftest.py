from typing import Any, List, Optional

import httpx
import pytest

from search_mcp.core.config import Settings
from search_mcp.server import build_dispatcher


class StubUpstream:
    """
    Deterministic stand-in for the Brave API. Records every request it receives
    so tests can inspect the outbound URL and headers, or assert that no
    network call happened at all.
    """

    def __init__(self, status_code: int = 200, json_body: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self.json_body = {"type": "search", "web": {"results": []}} if json_body is None else json_body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def make_settings(api_key: Optional[str] = "test-key", **overrides) -> Settings:
    return Settings(_env_file=None, SEARCH_MCP_API_KEY=api_key, **overrides)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def dispatcher(settings, upstream):
    return build_dispatcher(settings, transport=upstream.transport)


@pytest.fixture
def keyless_dispatcher(upstream):
    return build_dispatcher(make_settings(api_key=None), transport=upstream.transport)
