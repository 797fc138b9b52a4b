"""Planner request model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PlanRequest(BaseModel):
    """Arguments for a single dinner-and-wine plan.

    Accepts the wire names (mainDish, sidesCount) as well as the Python ones.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    main_dish: str = Field(alias="mainDish")
    sides_count: int = Field(default=2, alias="sidesCount")  # unbounded, used verbatim
    cuisine: Optional[str] = None  # not checked against CUISINES
