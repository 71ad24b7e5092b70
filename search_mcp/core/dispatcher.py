# search_mcp/core/dispatcher.py
# Resolves tools/list and tools/call requests against the tool registry.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from typing import Any, Dict, List, Union
from search_mcp.core.tool_registry import ToolRegistry
from search_mcp.core.validation import validate_arguments
from search_mcp.models.common import InvocationError, ToolResult
from search_mcp.utils.logger import console


class ToolDispatcher:
    """
    Stateless request router. Every invocation goes through the same chain:
    registry lookup, argument validation, then the tool's handler. Each failure
    is terminal for that invocation and returned as an InvocationError.
    """
    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    def list_tools(self) -> List[Dict[str, Any]]:
        return self._registry.get_definitions()

    async def invoke(self, name: str, arguments: Any = None) -> Union[ToolResult, InvocationError]:
        tool = self._registry.lookup(name)
        if tool is None:
            console.error(f"Attempted to execute unknown tool: {name}")
            return InvocationError.unknown_tool(name)

        args = validate_arguments(tool.args_schema, arguments)
        if isinstance(args, InvocationError):
            console.warning(f"Rejected arguments for tool '{name}': {args.message}")
            return args

        outcome = await tool.execute(args)
        if isinstance(outcome, InvocationError):
            console.error(f"Tool '{name}' failed with {outcome.kind.value}: {outcome.message}")
        else:
            console.success(f"Tool '{name}' executed successfully.")
        return outcome
