"""
Repository layer - Data access abstraction.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.recipe_repository import RecipeRepository
from repositories.plan_repository import PlanRepository, ingredient_totals_pipeline

__all__ = [
    "BaseRepository",
    "UserRepository",
    "RecipeRepository",
    "PlanRepository",
    "ingredient_totals_pipeline",
]
