"""Recipe search routes (Spoonacular gateway)"""

from fastapi import APIRouter, Depends, Query
import logging

from adapters import SpoonacularClient
from api.dependencies import get_settings, get_spoonacular
from app.config import Settings
from services.recipe_search_service import RecipeSearchService

router = APIRouter(prefix="/api/spoon", tags=["Search"])
logger = logging.getLogger("cookbook.api.search")


@router.get("")
def search_recipes(
    q: str = Query(..., min_length=1, description="Free text recipe query"),
    client: SpoonacularClient = Depends(get_spoonacular),
    settings: Settings = Depends(get_settings),
):
    """
    Search Spoonacular and return the detailed top results.

    - **404** when nothing matches
    - **500** when any upstream call fails (no partial results)
    """
    recipes = RecipeSearchService.search(
        client, q, settings.spoon_result_count, settings.placeholder_image
    )
    return {"r": recipes}
