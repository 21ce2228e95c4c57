from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pymongo.database import Database

from api.dependencies import get_mongo_db
from app.exceptions import ServiceError
from domain.schemas.plan_schemas import SavePlanRequest
from services.plan_service import PlanService

router = APIRouter(prefix="/api/recipeplan", tags=["Meal Planning"])
logger = logging.getLogger("cookbook.api.plans")


@router.get("/{useremail}", response_model=List[Dict[str, Any]])
def list_user_plans(useremail: str, mongo_db: Database = Depends(get_mongo_db)):
    """All weekly plans saved by ``useremail``"""
    try:
        plans = PlanService.list_plans(mongo_db, useremail)
        logger.info("Found %d plans for user %s", len(plans), useremail)
        return plans
    except Exception as e:
        logger.exception("Error listing plans for user %s", useremail)
        raise HTTPException(status_code=500, detail=f"Failed to fetch user plans: {str(e)}")


@router.post("/{useremail}")
def save_plan(
    useremail: str, body: SavePlanRequest, mongo_db: Database = Depends(get_mongo_db)
):
    """
    Save a weekly plan for ``useremail``.

    Every call inserts a new plan. ``username`` and ``useravatar`` in the
    body are ignored; the owner and timestamp are set by the server.
    """
    try:
        return PlanService.save_plan(mongo_db, useremail, body.recipeplan)
    except ServiceError:
        raise
    except Exception as e:
        logger.exception("Error saving plan for user %s", useremail)
        raise HTTPException(status_code=500, detail=f"Failed to save plan: {str(e)}")


@router.delete("/{oid}")
def delete_plan(oid: str, mongo_db: Database = Depends(get_mongo_db)):
    """Delete a plan by id. Deleting an unknown id is not an error."""
    try:
        return PlanService.delete_plan(mongo_db, oid)
    except ServiceError:
        raise
    except Exception as e:
        logger.exception("Error deleting plan %s", oid)
        raise HTTPException(status_code=500, detail=f"Failed to delete plan: {str(e)}")
