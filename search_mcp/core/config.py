# The module is to define the configuration settings for the search gateway.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# Environment key holding the provider credential.
API_KEY_ENV = "SEARCH_MCP_API_KEY"


class Settings(BaseSettings):
    """
    The Settings class holds the process-wide configuration of the gateway.
    It is read once at startup from the environment (and an optional .env file)
    and is immutable afterwards; it is handed explicitly to the components that need it.
    Attributes:
        MCP_NAME (str): The server identity reported to MCP clients.
        SEARCH_MCP_API_KEY (Optional[str]): The Brave Search subscription token.
        SEARCH_MCP_BASE_URL (str): Base URL of the Brave Search API.
        SEARCH_MCP_TIMEOUT (Optional[float]): Per-request timeout in seconds, None for no timeout.
        LOG_LEVEL (str): The logging level for the console.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Server identity
    MCP_NAME: str = "url-context-mcp"

    # BRAVE_SEARCH
    SEARCH_MCP_API_KEY: Optional[str] = None
    SEARCH_MCP_BASE_URL: str = "https://api.search.brave.com/res/v1"
    SEARCH_MCP_TIMEOUT: Optional[float] = None

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.SEARCH_MCP_API_KEY)


# lru_cache to cache the settings instance.
@lru_cache
def get_settings() -> Settings:
    return Settings()
