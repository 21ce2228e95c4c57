"""
Recipe Repository - Data access layer for saved recipes (MongoDB)
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import InsertOneResult

logger = logging.getLogger("cookbook.repositories.recipe")

RECIPES_COLLECTION = "recipes"


class RecipeRepository:
    """
    Repository for the ``recipes`` collection.
    Documents are keyed by the external ``id`` field.
    """

    def __init__(self, mongo_db: Database, collection: str = RECIPES_COLLECTION):
        self.collection: Collection = mongo_db[collection]

    def ensure_indexes(self) -> None:
        """Create the unique index on the external id"""
        self.collection.create_index([("id", ASCENDING)], unique=True, name="recipe_external_id")

    def list_newest_first(self) -> List[Dict[str, Any]]:
        """All recipes ordered by insertion timestamp, newest first"""
        return list(self.collection.find({}).sort("ts", DESCENDING))

    def find_by_external_id(self, external_id: int) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"id": external_id})

    def insert(self, recipe: Dict[str, Any]) -> InsertOneResult:
        return self.collection.insert_one(recipe)
