# The module provides a FastAPI application exposing the tool dispatcher over HTTP.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from typing import Optional
import httpx
from fastapi import FastAPI
from search_mcp.api.v1.api import api_router
from search_mcp.core.config import Settings, get_settings
from search_mcp.server import SERVER_VERSION, build_dispatcher
from search_mcp.utils.logger import console


def create_app(settings: Optional[Settings] = None,
               transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()
    app = FastAPI(
        title=settings.MCP_NAME,
        version=SERVER_VERSION,
        description="Brave Search tools behind a schema-validated dispatcher.",
    )
    app.state.dispatcher = build_dispatcher(settings, transport=transport)

    @app.get("/", summary="Health Check", tags=["Status"])
    def read_root():
        """Root endpoint to check if the service is alive."""
        console.info("Health check endpoint was hit.")
        return {"message": f"{settings.MCP_NAME} is alive and running!"}

    # Include the v1 router with a global '/v1' prefix
    app.include_router(api_router, prefix="/v1")
    return app


app = create_app()
