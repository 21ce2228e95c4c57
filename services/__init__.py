"""Services package - Business logic layer"""

from services.recipe_service import RecipeService
from services.recipe_search_service import RecipeSearchService
from services.plan_service import PlanService
from services.ingredient_service import IngredientService
from services.admin_service import AdminService
from services.auth_service import AuthService

__all__ = [
    "RecipeService",
    "RecipeSearchService",
    "PlanService",
    "IngredientService",
    "AdminService",
    "AuthService",
]
