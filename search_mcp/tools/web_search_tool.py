# The module is to define the WebSearchTool that uses the Brave Web Search API.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Type
from .base_tool import BaseTool
from search_mcp.utils.logger import console


class WebSearchInput(BaseModel):
    """
    Input model for the WebSearchTool.
    Attributes:
        query (str): The search query.
        count (Optional[int]): Number of results, 1 to 20.
        offset (Optional[int]): Zero-based results offset.
        safeSearch (Optional[str]): One of 'off', 'moderate', 'strict'.
        country (Optional[str]): Country code the results come from.
        freshness (Optional[str]): One of 'pd', 'pw', 'pm', 'py'.
        enableRichCallback (Optional[bool]): Ask the provider for a rich callback hint.
    """
    model_config = ConfigDict(strict=True)

    # Optional fields default to None when absent; an explicit null is rejected.
    query: str = Field(..., min_length=1, description="Search query")
    count: int = Field(default=None, ge=1, le=20, description="Results count (1-20)")
    offset: int = Field(default=None, ge=0, description="Results offset")
    safeSearch: Literal["off", "moderate", "strict"] = None
    country: str = None
    freshness: Literal["pd", "pw", "pm", "py"] = None
    enableRichCallback: bool = Field(default=None, description="Include rich callback hint")


class WebSearchTool(BaseTool):
    """
    Searches the web through the Brave Web Search API and relays the raw result page.
    """
    name: str = "web_search"
    description: str = "Search the web using Brave Web Search API"
    args_schema: Type[BaseModel] = WebSearchInput

    async def execute(self, args: WebSearchInput):
        console.info(f"Executing tool '{self.name}' with query: '{args.query}'")
        params = [
            ("q", args.query),
            ("count", args.count),
            ("offset", args.offset),
            ("safesearch", args.safeSearch),
            ("country", args.country),
            ("freshness", args.freshness),
            # The provider only understands the flag being set.
            ("enable_rich_callback", "1" if args.enableRichCallback else None),
        ]
        return await self._relay("web/search", params)
