from __future__ import annotations

import logging
from typing import Any, Dict, List

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import DeleteResult, InsertOneResult

logger = logging.getLogger("cookbook.repositories.plan")

RECIPE_PLAN_COLLECTION = "recipesplan"


def ingredient_totals_pipeline(useremail: str) -> List[Dict[str, Any]]:
    """
    Aggregation pipeline summing a user's ingredient amounts per week.

    Ingredients are grouped on (weekStart, name, unit) so the same name in two
    units stays two entries; each week then collects its totals.
    """
    return [
        {"$match": {"useremail": useremail}},
        {"$project": {"weekStart": 1, "extendedIngredients": 1}},
        {"$unwind": "$extendedIngredients"},
        {
            "$project": {
                "weekStart": 1,
                "name": "$extendedIngredients.name",
                "amount": "$extendedIngredients.amount",
                "unit": "$extendedIngredients.unit",
            }
        },
        {
            "$group": {
                "_id": {"weekStart": "$weekStart", "name": "$name", "unit": "$unit"},
                "totalAmount": {"$sum": "$amount"},
            }
        },
        {
            "$project": {
                "_id": 0,
                "weekStart": "$_id.weekStart",
                "name": "$_id.name",
                "unit": "$_id.unit",
                "totalAmount": 1,
            }
        },
        {
            "$group": {
                "_id": "$weekStart",
                "ingredients": {
                    "$push": {"name": "$name", "unit": "$unit", "totalAmount": "$totalAmount"}
                },
            }
        },
        {"$project": {"_id": 0, "weekStart": "$_id", "ingredients": 1}},
        {"$sort": {"weekStart": 1}},
    ]


class PlanRepository:
    """
    Repository for the ``recipesplan`` collection.
    Each document is one user's plan for one week.
    """

    def __init__(self, mongo_db: Database, collection: str = RECIPE_PLAN_COLLECTION):
        self.collection: Collection = mongo_db[collection]

    def find_by_user(self, useremail: str) -> List[Dict[str, Any]]:
        """All plans owned by ``useremail``"""
        return list(self.collection.find({"useremail": useremail}))

    def insert(self, plan: Dict[str, Any]) -> InsertOneResult:
        return self.collection.insert_one(plan)

    def delete_by_id(self, oid: ObjectId) -> DeleteResult:
        return self.collection.delete_one({"_id": oid})

    def delete_by_user(self, useremail: str) -> DeleteResult:
        """Remove every plan owned by ``useremail``"""
        return self.collection.delete_many({"useremail": useremail})

    def aggregate_ingredients(self, useremail: str) -> List[Dict[str, Any]]:
        return list(self.collection.aggregate(ingredient_totals_pipeline(useremail)))
