"""Ingredient service - weekly shopping totals from saved plans."""

from typing import Any, Dict, List
import logging

from pymongo.database import Database

from domain.schemas.user_schemas import canonical_email
from repositories import PlanRepository

logger = logging.getLogger("cookbook.ingredient")


class IngredientService:
    """Business logic for ingredient aggregation."""

    @staticmethod
    def weekly_totals(mongo_db: Database, useremail: str) -> List[Dict[str, Any]]:
        """
        Sum the ingredient amounts of all of a user's plans, per week.

        Returns one ``{weekStart, ingredients: [{name, unit, totalAmount}]}``
        entry per planned week. Amounts in different units are not
        converted and stay separate. A user without plans gets ``[]``.
        """
        useremail = canonical_email(useremail)
        weeks = PlanRepository(mongo_db).aggregate_ingredients(useremail)
        logger.info(f"ingredients_aggregated useremail={useremail} weeks={len(weeks)}")
        return weeks
