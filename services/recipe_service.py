"""Recipe persistence - saved search results in the ``recipes`` collection."""

from datetime import datetime, timezone
from typing import Any, Dict, List
import logging

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from domain.mappers import DocumentMapper
from domain.schemas.recipe_schemas import RecipeDocument
from repositories import RecipeRepository

logger = logging.getLogger("cookbook.recipe")

NOT_SAVED = {"msg": "data already exists, not saved"}


class RecipeService:
    """Business logic for saved recipes"""

    @staticmethod
    def list_recipes(mongo_db: Database) -> List[Dict[str, Any]]:
        """All saved recipes, newest first"""
        docs = RecipeRepository(mongo_db).list_newest_first()
        return [DocumentMapper.to_public(d) for d in docs]

    @staticmethod
    def save_recipe(mongo_db: Database, recipe: RecipeDocument) -> Dict[str, Any]:
        """
        Store ``recipe`` unless one with the same external id already exists.

        The existence check is a plain read; a concurrent save that slips past
        it is stopped by the unique index and reported the same way.
        """
        repo = RecipeRepository(mongo_db)
        if repo.find_by_external_id(recipe.id) is not None:
            logger.info(f"recipe_not_saved id={recipe.id} reason=exists")
            return dict(NOT_SAVED)

        doc = recipe.model_dump(exclude_unset=True)
        doc.pop("_id", None)
        doc["ts"] = datetime.now(timezone.utc)
        try:
            result = repo.insert(doc)
        except DuplicateKeyError:
            logger.info(f"recipe_not_saved id={recipe.id} reason=duplicate_key")
            return dict(NOT_SAVED)

        logger.info(f"recipe_saved id={recipe.id} oid={result.inserted_id}")
        return DocumentMapper.insert_result(result)
