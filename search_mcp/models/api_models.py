# The module is to define the API models for the HTTP surface.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class ToolDefinition(BaseModel):
    """
    The wire-visible description of a tool.
    Attributes:
        name (str): The tool name.
        description (str): What the tool does.
        inputSchema (Dict[str, Any]): JSON schema of the tool arguments.
    """
    name: str
    description: str
    inputSchema: Dict[str, Any]


class ListToolsResponse(BaseModel):
    """Defines the response body for GET /v1/tools."""
    tools: List[ToolDefinition]


class CallToolRequest(BaseModel):
    """
    Defines the request body for POST /v1/tools/call.
    Attributes:
        name (str): The tool to invoke.
        arguments (Optional[Any]): The raw tool arguments, validated by the tool itself.
    """
    name: str = Field(..., description="The name of the tool to invoke.")
    arguments: Optional[Any] = Field(default=None, description="The tool arguments.")
