# search_mcp/core/envelope.py
# Maps tool results and invocation errors onto the MCP response shapes.

import json
from typing import Any, Dict
from mcp import types
from search_mcp.models.common import ErrorKind, InvocationError, JsonResult, ToolResult

ERROR_CODE_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.UNKNOWN_TOOL: types.METHOD_NOT_FOUND,
    ErrorKind.VALIDATION_FAILED: types.INVALID_PARAMS,
    ErrorKind.MISSING_CREDENTIAL: types.INTERNAL_ERROR,
    ErrorKind.UPSTREAM_FAILURE: types.INTERNAL_ERROR,
}

# Used by the HTTP surface.
HTTP_STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.UNKNOWN_TOOL: 404,
    ErrorKind.VALIDATION_FAILED: 422,
    ErrorKind.MISSING_CREDENTIAL: 503,
    ErrorKind.UPSTREAM_FAILURE: 502,
}


def dump_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    """
    A JSON result becomes one text block holding the compact JSON, plus
    structuredContent when the payload is an object. A text result becomes one text block.
    """
    if isinstance(result, JsonResult):
        structured = result.data if isinstance(result.data, dict) else None
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=dump_json(result.data))],
            structuredContent=structured,
            isError=False,
        )
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=result.text)],
        isError=False,
    )


def error_payload(error: InvocationError) -> Dict[str, Any]:
    return error.model_dump(mode="json", exclude_none=True)


def to_error_data(error: InvocationError) -> types.ErrorData:
    return types.ErrorData(
        code=ERROR_CODE_BY_KIND[error.kind],
        message=error.message,
        data=error_payload(error),
    )
