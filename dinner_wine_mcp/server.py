"""MCP Server for Dinner and Wine.

Exposes a static cuisine list and a dinner-and-wine planning prompt
via the Model Context Protocol (MCP).
"""

import argparse
import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .config import SERVER_VERSION, TRANSPORTS, config
from .cuisines import CUISINE_LIST_URI, cuisines_json
from .models import PlanRequest
from .planner import choose_cuisine, compose_plan, format_plan

logger = logging.getLogger(__name__)

PLANNER_TOOL_NAME = "dinner-and-wine-planner"

mcp = FastMCP(
    config.server_name,
    instructions="""You help plan dinners with a matching wine.

- Read `config://cuisines` for the cuisines the planner knows about.
- Call `dinner-and-wine-planner` with the main dish; pass a cuisine to pin it,
  otherwise one is picked at random from the list.""",
)
# FastMCP has no version option; report ours instead of the SDK's
mcp._mcp_server.version = SERVER_VERSION


# ============================================================================
# RESOURCES
# ============================================================================


@mcp.resource(CUISINE_LIST_URI, name="cuisineList", mime_type="application/json")
def cuisine_list() -> str:
    """The cuisines the planner picks from when none is given."""
    return cuisines_json()


# ============================================================================
# TOOLS
# ============================================================================


# Argument names are the tool's wire schema.
@mcp.tool(
    name=PLANNER_TOOL_NAME,
    annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False),
    structured_output=False,
)
async def dinner_and_wine_planner(
    mainDish: str,
    sidesCount: int = 2,
    cuisine: str = "",
) -> str:
    """Write a dinner plan prompt with side dishes and a wine pairing.

    Args:
        mainDish: The main dish to build the dinner around
        sidesCount: How many sides to suggest (default 2)
        cuisine: Cuisine to plan for; a random one is used if omitted

    Returns:
        Prompt text asking for sides, a wine pairing and why it works
    """
    request = PlanRequest(mainDish=mainDish, sidesCount=sidesCount, cuisine=cuisine)
    return compose_plan(request)


# ============================================================================
# PROMPTS
# ============================================================================


@mcp.prompt(name="plan_dinner")
def plan_dinner(mainDish: str, sidesCount: str = "2", cuisine: str = "") -> str:
    """Plan a dinner around a main dish, with sides and a wine pairing."""
    return format_plan(choose_cuisine(cuisine), mainDish, sidesCount)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dinner and Wine MCP server.")
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default=config.transport if config.transport in TRANSPORTS else "stdio",
        help="Transport protocol to use (defaults to stdio).",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (defaults to warning).",
    )
    args = parser.parse_args(argv)

    level = getattr(logging, args.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING

    # stderr only; stdout carries the stdio transport
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting %s over %s", config.server_name, args.transport)

    mcp.run(transport=args.transport)


# Entry point
if __name__ == "__main__":
    main()
