# The module provides the MCP stdio server, the main entry point of search-mcp.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

import asyncio
import sys
from typing import List, Optional
import httpx
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from search_mcp.core.config import API_KEY_ENV, Settings, get_settings
from search_mcp.core.dispatcher import ToolDispatcher
from search_mcp.core.envelope import to_call_tool_result, to_error_data
from search_mcp.core.tool_registry import build_registry
from search_mcp.models.common import InvocationError
from search_mcp.services.search_client import SearchClient
from search_mcp.utils.logger import console

SERVER_VERSION = "0.1.0"


def build_dispatcher(settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> ToolDispatcher:
    """Wires settings -> search client -> registry -> dispatcher."""
    client = SearchClient(settings, transport=transport)
    return ToolDispatcher(build_registry(client))


def create_server(settings: Settings, dispatcher: ToolDispatcher) -> Server:
    """
    Creates the MCP server and binds tools/list and tools/call to the dispatcher.
    A failed invocation is answered with a JSON-RPC error for that request only.
    """
    server = Server(settings.MCP_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [types.Tool(**definition) for definition in dispatcher.list_tools()]

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        outcome = await dispatcher.invoke(request.params.name, request.params.arguments)
        if isinstance(outcome, InvocationError):
            raise McpError(to_error_data(outcome))
        return types.ServerResult(to_call_tool_result(outcome))

    # Bound directly: the dispatcher owns validation and every error shape.
    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(settings: Settings):
    dispatcher = build_dispatcher(settings)
    server = create_server(settings, dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        console.info(f"'{settings.MCP_NAME}' listening on stdio.")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    try:
        settings = get_settings()
        console.set_level(settings.LOG_LEVEL)
        if not settings.has_api_key:
            console.warning(f"{API_KEY_ENV} is not set; every tool call will fail until it is configured.")
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        console.info("Interrupted, shutting down.")
    except Exception as e:
        console.exception("[search-mcp] fatal")
        console.display_error_panel("search-mcp failed to start", str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
