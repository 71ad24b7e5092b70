# The module is to define the RichFetchTool for Brave rich results.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, ConfigDict, Field
from typing import Type
from .base_tool import BaseTool
from search_mcp.utils.logger import console


class RichFetchInput(BaseModel):
    """
    Input model for the RichFetchTool.
    Attributes:
        callback_key (str): The key found at rich.hint.callback_key in a web_search result.
    """
    model_config = ConfigDict(strict=True)

    callback_key: str = Field(..., min_length=1, description="callback_key from web_search.rich.hint.callback_key")


class RichFetchTool(BaseTool):
    """
    Resolves a rich callback (weather, stocks, sports...) announced by a previous web_search.
    """
    name: str = "rich_fetch"
    description: str = "Fetch rich results using the callback_key from web_search"
    args_schema: Type[BaseModel] = RichFetchInput

    async def execute(self, args: RichFetchInput):
        console.info(f"Executing tool '{self.name}'")
        return await self._relay("web/rich", [("callback_key", args.callback_key)])
