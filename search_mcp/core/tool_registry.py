# Holds the ordered, read-only set of tools the gateway exposes.
# Version 0.1.0

from typing import Dict, Iterable, Iterator, List, Any, Optional
from search_mcp.services.search_client import SearchClient
from search_mcp.tools.base_tool import BaseTool
from search_mcp.tools.web_search_tool import WebSearchTool
from search_mcp.tools.local_search_tools import LocalPoisTool, LocalDescriptionsTool
from search_mcp.tools.rich_fetch_tool import RichFetchTool
from search_mcp.utils.logger import console

# Registration order is the order clients see in tools/list.
BUILTIN_TOOL_CLASSES = (WebSearchTool, LocalPoisTool, LocalDescriptionsTool, RichFetchTool)


class DuplicateToolError(ValueError):
    """Raised when two tools are registered under the same name."""


class ToolRegistry:
    """
    An ordered name -> tool mapping. Tools are registered at startup, then the
    registry is sealed and only read from.
    """
    def __init__(self, tools: Iterable[BaseTool] = ()):
        self._tools: Dict[str, BaseTool] = {}
        self._sealed = False
        for tool in tools:
            self.register(tool)

    def register(self, tool: BaseTool):
        if self._sealed:
            raise RuntimeError(f"Cannot register '{tool.name}': the tool registry is sealed.")
        if tool.name in self._tools:
            raise DuplicateToolError(f"Tool '{tool.name}' is already registered.")
        self._tools[tool.name] = tool
        console.info(f"Successfully registered tool: '{tool.name}'")

    def seal(self):
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def names(self) -> List[str]:
        return list(self._tools)

    def lookup(self, name: str) -> Optional[BaseTool]:
        return self._tools.get(name)

    def get_definitions(self) -> List[Dict[str, Any]]:
        """Returns the wire definitions of all tools, in registration order."""
        return [tool.get_definition() for tool in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[BaseTool]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)


def builtin_tools(client: SearchClient) -> List[BaseTool]:
    return [tool_class(client) for tool_class in BUILTIN_TOOL_CLASSES]


def build_registry(client: SearchClient) -> ToolRegistry:
    """Registers the built-in catalog against `client` and seals the registry."""
    registry = ToolRegistry(builtin_tools(client))
    registry.seal()
    console.success(f"Tool registration complete. Found {len(registry)} tools: {registry.names}")
    return registry
