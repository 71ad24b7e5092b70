# search_mcp/services/search_client.py
# Thin async client for the Brave Search API, shared by every tool.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

import httpx
from typing import Any, List, Optional, Sequence, Tuple, Union
from search_mcp.core.config import API_KEY_ENV, Settings
from search_mcp.models.common import InvocationError
from search_mcp.utils.logger import console

QueryParams = Sequence[Tuple[str, Any]]


def encode_params(params: QueryParams) -> List[Tuple[str, str]]:
    """
    Drops pairs whose value is None or stringifies to '' and stringifies the rest.
    Order and repeated keys are preserved, so [('ids', 'a'), ('ids', 'b')]
    is sent as ids=a&ids=b.
    """
    encoded = []
    for key, value in params:
        if value is None:
            continue
        text = str(value)
        if text:
            encoded.append((key, text))
    return encoded


class SearchClient:
    """
    Performs GET requests against the search provider and returns the decoded
    JSON body, or an InvocationError describing why it could not.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._api_key = settings.SEARCH_MCP_API_KEY or None
        self._base_url = settings.SEARCH_MCP_BASE_URL.rstrip("/")
        self._timeout = settings.SEARCH_MCP_TIMEOUT
        self._transport = transport

    def endpoint(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def fetch_json(self, url: str, params: QueryParams = ()) -> Union[Any, InvocationError]:
        if not self._api_key:
            console.error(f"Refusing to call {url}: {API_KEY_ENV} is not set.")
            return InvocationError.missing_credential(API_KEY_ENV)

        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self._api_key,
        }

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.get(url, params=encode_params(params), headers=headers)
        except httpx.HTTPError as e:
            console.error(f"Request to {url} failed: {e}")
            return InvocationError.upstream_failure(
                f"Brave API request failed: {e}", cause=type(e).__name__
            )

        if not response.is_success:
            body = response.text
            console.error(f"Brave API {response.status_code} for {response.request.url}")
            return InvocationError.upstream_failure(
                f"Brave API {response.status_code}: {body}",
                status_code=response.status_code,
                body=body,
            )

        try:
            return response.json()
        except ValueError as e:
            console.error(f"Brave API returned a non-JSON body for {response.request.url}")
            return InvocationError.upstream_failure(
                f"Brave API returned invalid JSON: {e}",
                status_code=response.status_code,
                body=response.text,
                cause=type(e).__name__,
            )
