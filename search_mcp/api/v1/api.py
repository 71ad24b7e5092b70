# The module is to define the API router for the HTTP surface.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from fastapi import APIRouter
from search_mcp.api.v1.endpoints import tools

api_router = APIRouter()

# Include the tools router with a '/tools' prefix
api_router.include_router(tools.router, prefix="/tools", tags=["Tools"])
