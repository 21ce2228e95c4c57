"""
Recipe routes - saved recipes in the document store.
"""

from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database
from typing import List, Dict, Any
import logging

from api.dependencies import get_mongo_db
from app.exceptions import ServiceError
from domain.schemas.recipe_schemas import SaveRecipeRequest
from services.recipe_service import RecipeService

router = APIRouter(prefix="/api/recipe", tags=["Recipes"])
logger = logging.getLogger("cookbook.api.recipes")


@router.get("", response_model=List[Dict[str, Any]])
def list_recipes(mongo_db: Database = Depends(get_mongo_db)):
    """All saved recipes, newest first"""
    try:
        return RecipeService.list_recipes(mongo_db)
    except Exception as e:
        logger.exception("Error listing recipes")
        raise HTTPException(status_code=500, detail=f"Failed to list recipes: {str(e)}")


@router.post("")
def save_recipe(body: SaveRecipeRequest, mongo_db: Database = Depends(get_mongo_db)):
    """
    Save a recipe unless one with the same id is already stored.

    Returns the insert acknowledgement, or ``{"msg": "data already exists,
    not saved"}`` for a duplicate.
    """
    try:
        return RecipeService.save_recipe(mongo_db, body.recipe)
    except ServiceError:
        raise
    except Exception as e:
        logger.exception(f"Error saving recipe {body.recipe.id}")
        raise HTTPException(status_code=500, detail=f"Failed to save recipe: {str(e)}")
