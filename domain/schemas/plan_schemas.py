from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PlanIngredient(BaseModel):
    """Ingredient line embedded in a weekly plan"""

    model_config = ConfigDict(extra="allow")

    name: str
    amount: float = 0.0
    unit: str = ""


class RecipePlan(BaseModel):
    """A user's selection for one week.

    ``username`` and ``useravatar`` may be sent by the client for display but
    are never persisted.
    """

    model_config = ConfigDict(extra="allow")

    weekStart: str = Field(..., min_length=1, description="First day of the planned week")
    extendedIngredients: List[PlanIngredient] = Field(default_factory=list)


class SavePlanRequest(BaseModel):
    recipeplan: RecipePlan


class IngredientTotal(BaseModel):
    name: str
    unit: str
    totalAmount: float


class WeeklyIngredients(BaseModel):
    weekStart: str
    ingredients: List[IngredientTotal]
