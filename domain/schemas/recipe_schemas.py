"""Pydantic schemas for recipe documents saved from search results."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RecipeDocument(BaseModel):
    """Recipe as returned by the search gateway.

    Only the external id is required; every other field the client sends is
    stored as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="External (Spoonacular) recipe id")
    title: Optional[str] = None
    image: Optional[str] = None


class SaveRecipeRequest(BaseModel):
    recipe: RecipeDocument
