# The module is to define the base class for all tools in the gateway.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from abc import ABC, abstractmethod
from pydantic import BaseModel
from typing import Any, Dict, Type, Union
from search_mcp.models.common import InvocationError, JsonResult, ToolResult
from search_mcp.services.search_client import SearchClient


class BaseTool(ABC):
    """
    Abstract Base Class for all tools.

    This class defines a standard interface that all tools must implement.
    Attributes:
        name (str): The name of the tool, part of the wire contract.
        description (str): A brief description of what the tool does.
        args_schema (Type[BaseModel]): A Pydantic model defining the arguments
            that the tool accepts, which will be validated before execution.
    """
    name: str
    description: str
    args_schema: Type[BaseModel]

    def __init__(self, client: SearchClient):
        self._client = client

    @abstractmethod
    async def execute(self, args: BaseModel) -> Union[ToolResult, InvocationError]:
        """
        The core logic of the tool. This method must be implemented by all subclasses.

        Args:
            args: An instance of args_schema, already validated by the dispatcher.

        Returns:
            The tool result, or the InvocationError reported by the search client.
        """

    async def _relay(self, path: str, params) -> Union[ToolResult, InvocationError]:
        """Fetches `path` from the provider and wraps the body, unchanged, as a JSON result."""
        payload = await self._client.fetch_json(self._client.endpoint(path), params)
        if isinstance(payload, InvocationError):
            return payload
        return JsonResult(data=payload)

    def get_definition(self) -> Dict[str, Any]:
        """
        Returns the wire-visible definition of the tool. The handler itself is
        never part of it.
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.args_schema.model_json_schema(),
        }
