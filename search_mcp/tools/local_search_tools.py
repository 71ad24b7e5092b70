# Tools for the Brave Local Search API: point-of-interest details and descriptions.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Type
from .base_tool import BaseTool
from search_mcp.utils.logger import console


class LocationIdsInput(BaseModel):
    """
    Input model shared by the local search tools.
    Attributes:
        ids (List[str]): Non-empty location ids taken from a web_search result, 1 to 20 of them.
    """
    model_config = ConfigDict(strict=True)

    ids: List[Annotated[str, Field(min_length=1)]] = Field(
        ..., min_length=1, max_length=20, description="Location ids (1-20)"
    )


class _LocationTool(BaseTool):
    args_schema: Type[BaseModel] = LocationIdsInput
    path: str

    async def execute(self, args: LocationIdsInput):
        console.info(f"Executing tool '{self.name}' for {len(args.ids)} location(s)")
        # One ids=<value> pair per id; the provider does not accept a joined list.
        return await self._relay(self.path, [("ids", location_id) for location_id in args.ids])


class LocalPoisTool(_LocationTool):
    """Fetches extra information (address, hours, ratings...) for locations."""
    name: str = "local_pois"
    description: str = "Fetch extra information for locations using Brave Local Search API"
    path: str = "local/pois"


class LocalDescriptionsTool(_LocationTool):
    """Fetches AI-generated descriptions for locations."""
    name: str = "local_descriptions"
    description: str = "Fetch AI-generated descriptions for locations using Brave Local Search API"
    path: str = "local/descriptions"
