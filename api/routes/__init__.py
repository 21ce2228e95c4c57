"""API routes package"""

from . import auth, search, recipes, plans, ingredients, admin, health

__all__ = ["auth", "search", "recipes", "plans", "ingredients", "admin", "health"]
