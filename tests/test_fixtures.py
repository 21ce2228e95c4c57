"""
Shared test client and factories for the Cookbook test suite.

The client is created without entering the app lifespan, so no real
database or HTTP client is opened; tests wire in-memory stores through
``app.dependency_overrides`` (see the ``stores`` fixture in conftest.py).
"""

import uuid
from typing import Any, Dict, List, Optional, Tuple

import httpx
from fastapi.testclient import TestClient

from domain.enums import UserRole
from domain.models import RecipeUser
from main import app

client = TestClient(app)


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def make_user(email: Optional[str] = None, role: UserRole = UserRole.REGULAR, name: str = "Sarah Martinez") -> RecipeUser:
    return RecipeUser(email=email or unique_email("sarah.martinez"), role=role, name=name)


def make_plan(
    week_start: str = "2020-12-07",
    ingredients: Optional[List[Tuple[str, float, str]]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Plan body as the frontend sends it.

    Args:
        week_start: first day of the week
        ingredients: (name, amount, unit) tuples

    Example:
        >>> make_plan("2020-12-07", [("flour", 200, "g")])["extendedIngredients"][0]
        {'name': 'flour', 'amount': 200, 'unit': 'g'}
    """
    ingredients = ingredients if ingredients is not None else [("flour", 200, "g")]
    plan = {
        "weekStart": week_start,
        "extendedIngredients": [
            {"name": name, "amount": amount, "unit": unit} for name, amount, unit in ingredients
        ],
    }
    plan.update(extra)
    return plan


def make_spoon_recipe(recipe_id: int, title: str = "Pancakes", **fields: Any) -> Dict[str, Any]:
    """Spoonacular ``information`` record including fields the gateway strips"""
    record = {
        "id": recipe_id,
        "title": title,
        "image": f"https://spoonacular.com/recipeImages/{recipe_id}-556x370.jpg",
        "readyInMinutes": 25,
        "servings": 4,
        "instructions": "Mix and fry.",
        "extendedIngredients": [{"name": "flour", "amount": 200, "unit": "g"}],
        "vegetarian": True,
        "vegan": False,
        "glutenFree": False,
        "dairyFree": False,
        "cheap": False,
        "healthScore": 12,
        "spoonacularScore": 71.0,
        "creditsText": "Foodista",
        "license": "CC BY 3.0",
        "sourceName": "Foodista",
        "pricePerServing": 37.9,
        "imageType": "jpg",
        "cuisines": [],
        "dishTypes": ["breakfast"],
        "diets": ["lacto ovo vegetarian"],
        "occasions": [],
        "winePairing": {},
        "author": "someone",
    }
    record.update(fields)
    return record


def spoonacular_transport(search_results: List[Dict[str, Any]], details: Dict[int, Dict[str, Any]], calls: Optional[List[str]] = None) -> httpx.MockTransport:
    """Mock Spoonacular answering complexSearch and information calls"""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request.url.path)
        path = request.url.path
        if path.endswith("/complexSearch"):
            return httpx.Response(200, json={"results": search_results, "totalResults": len(search_results)})
        if path.endswith("/information"):
            recipe_id = int(path.split("/")[-2])
            if recipe_id not in details:
                return httpx.Response(404, json={"status": "failure"})
            return httpx.Response(200, json=details[recipe_id])
        return httpx.Response(404)

    return httpx.MockTransport(handler)
