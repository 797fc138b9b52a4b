"""Dinner-and-wine prompt composition."""

import logging
import random

from .cuisines import CUISINES
from .models import PlanRequest

logger = logging.getLogger(__name__)

PLAN_TEMPLATE = (
    "Plan some {cuisine} dinner featuring {main_dish}: "
    "suggest {sides_count} sides plus a wine pairing, "
    "then explain why that pairing works."
)

_rng = random.Random()


def choose_cuisine(cuisine: str | None = None, rng: random.Random | None = None) -> str:
    """Return the caller's cuisine, or a uniformly random one when it is missing or empty."""
    if cuisine:
        return cuisine
    return (rng or _rng).choice(CUISINES)


def format_plan(cuisine: str, main_dish: str, sides_count: int | str) -> str:
    """Fill the plan template; values are inserted as given."""
    return PLAN_TEMPLATE.format(
        cuisine=cuisine,
        main_dish=main_dish,
        sides_count=sides_count,
    )


def compose_plan(request: PlanRequest, rng: random.Random | None = None) -> str:
    """Format the planner prompt for a request.

    Args:
        request: Main dish, side count and optional cuisine
        rng: Random source for the cuisine fallback (seed it in tests)

    Returns:
        The formatted prompt text
    """
    chosen = choose_cuisine(request.cuisine, rng)
    if not request.cuisine:
        logger.debug("No cuisine given, picked %s", chosen)

    return format_plan(chosen, request.main_dish, request.sides_count)
