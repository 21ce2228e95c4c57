"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recipe_schemas import RecipeDocument, SaveRecipeRequest
from domain.schemas.plan_schemas import (
    PlanIngredient,
    RecipePlan,
    SavePlanRequest,
    IngredientTotal,
    WeeklyIngredients,
)
from domain.schemas.user_schemas import UserCreate, RoleUpdate, UserResponse, canonical_email
from domain.schemas.auth_schemas import FacebookProfile, SessionUser, LoginResult

__all__ = [
    # Recipe schemas
    "RecipeDocument",
    "SaveRecipeRequest",
    # Plan schemas
    "PlanIngredient",
    "RecipePlan",
    "SavePlanRequest",
    "IngredientTotal",
    "WeeklyIngredients",
    # User schemas
    "UserCreate",
    "RoleUpdate",
    "UserResponse",
    "canonical_email",
    # Auth schemas
    "FacebookProfile",
    "SessionUser",
    "LoginResult",
]
