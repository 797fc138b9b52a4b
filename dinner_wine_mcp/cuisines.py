"""Static cuisine list shared by the resource and the planner tool."""

import json

CUISINE_LIST_URI = "config://cuisines"

CUISINES: tuple[str, ...] = (
    "Italian",
    "French",
    "Mexican",
    "Japanese",
    "Mediterranean",
    "Indian",
    "Thai",
    "Spanish",
    "Korean",
    "Moroccan",
)


def cuisines_json() -> str:
    """Compact JSON array of the cuisine names, in list order."""
    return json.dumps(list(CUISINES), separators=(",", ":"))
