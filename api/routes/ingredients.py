"""Ingredient aggregation routes"""

from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database
from typing import List
import logging

from api.dependencies import get_mongo_db
from domain.schemas.plan_schemas import WeeklyIngredients
from services.ingredient_service import IngredientService

router = APIRouter(prefix="/api/ingredient", tags=["Ingredients"])
logger = logging.getLogger("cookbook.api.ingredients")


@router.get("/{useremail}", response_model=List[WeeklyIngredients])
def get_weekly_ingredients(useremail: str, mongo_db: Database = Depends(get_mongo_db)):
    """Ingredient totals per planned week; ``[]`` when the user has no plans"""
    try:
        return IngredientService.weekly_totals(mongo_db, useremail)
    except Exception as e:
        logger.exception("Error aggregating ingredients for %s", useremail)
        raise HTTPException(
            status_code=500, detail=f"Failed to aggregate ingredients: {str(e)}"
        )
