"""Configuration for the Dinner and Wine MCP server."""

import os
from dataclasses import dataclass

SERVER_VERSION = "0.1.0"

TRANSPORTS = ("stdio", "sse", "streamable-http")


@dataclass
class Config:
    """MCP server configuration."""

    server_name: str
    transport: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        - DINNER_WINE_TRANSPORT: stdio (default), sse or streamable-http
        - DINNER_WINE_LOG_LEVEL: logging level name, defaults to warning
        """
        return cls(
            server_name=os.environ.get("DINNER_WINE_SERVER_NAME", "Dinner and Wine"),
            transport=os.environ.get("DINNER_WINE_TRANSPORT", "stdio"),
            log_level=os.environ.get("DINNER_WINE_LOG_LEVEL", "warning"),
        )

    def reload(self):
        """Reload configuration from environment variables."""
        new_config = Config.from_env()
        self.server_name = new_config.server_name
        self.transport = new_config.transport
        self.log_level = new_config.log_level


config = Config.from_env()
