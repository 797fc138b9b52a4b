"""MCP Server for Dinner and Wine.

Exposes a cuisine list resource and a dinner-and-wine planner tool
via the Model Context Protocol (MCP).
"""

from .config import SERVER_VERSION as __version__
from .server import mcp

__all__ = ["mcp"]
