# The module is to define the API endpoints for listing and calling tools.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from search_mcp.core.dispatcher import ToolDispatcher
from search_mcp.core.envelope import HTTP_STATUS_BY_KIND, error_payload, to_call_tool_result
from search_mcp.models.api_models import CallToolRequest, ListToolsResponse
from search_mcp.models.common import InvocationError
from search_mcp.utils.logger import console

router = APIRouter()


def _dispatcher(request: Request) -> ToolDispatcher:
    return request.app.state.dispatcher


@router.get("", response_model=ListToolsResponse, summary="List Tools")
def list_tools(request: Request):
    """Returns every registered tool in registration order."""
    return ListToolsResponse(tools=_dispatcher(request).list_tools())


@router.post("/call", summary="Call Tool")
async def call_tool(body: CallToolRequest, request: Request):
    """
    Invokes a tool by name. Failures are answered with {"error": ...} and a status
    derived from the error kind.
    """
    console.info(f"Received HTTP call for tool '{body.name}'")
    outcome = await _dispatcher(request).invoke(body.name, body.arguments)
    if isinstance(outcome, InvocationError):
        return JSONResponse(
            status_code=HTTP_STATUS_BY_KIND[outcome.kind],
            content={"error": error_payload(outcome)},
        )
    result = to_call_tool_result(outcome)
    return JSONResponse(content=result.model_dump(mode="json", by_alias=True, exclude_none=True))
