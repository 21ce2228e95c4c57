"""Recipe search gateway over the Spoonacular API."""

import logging
from typing import Any, Dict, List

from adapters.spoonacular_adapter import SpoonacularClient
from app.exceptions import NotFoundError

logger = logging.getLogger("cookbook.search")

# Fields of the information record the frontend never shows
STRIPPED_FIELDS = (
    "vegetarian",
    "vegan",
    "glutenFree",
    "dairyFree",
    "cheap",
    "sustainable",
    "weightWatcherSmartPoints",
    "gaps",
    "lowFodmap",
    "aggregateLikes",
    "spoonacularScore",
    "healthScore",
    "creditsText",
    "license",
    "sourceName",
    "pricePerServing",
    "imageType",
    "cuisines",
    "dishTypes",
    "diets",
    "occasions",
    "winePairing",
    "originalId",
    "author",
)


class RecipeSearchService:
    @staticmethod
    def trim(record: Dict[str, Any], placeholder_image: str) -> Dict[str, Any]:
        """Drop the stripped fields, fill a missing image and collapse the card"""
        out = {k: v for k, v in record.items() if k not in STRIPPED_FIELDS}
        if not out.get("image"):
            out["image"] = placeholder_image
        out["showDetails"] = False
        return out

    @staticmethod
    def search(
        client: SpoonacularClient,
        query: str,
        number: int,
        placeholder_image: str,
    ) -> List[Dict[str, Any]]:
        """
        Search for ``query`` and return the detailed records of the top hits.

        Details are fetched one id at a time, keeping the search ranking. Any
        failure aborts the whole search.

        Raises:
            NotFoundError: the search matched nothing
            UpstreamServiceError: a Spoonacular call failed
        """
        ids = client.search_ids(query, number)
        if not ids:
            logger.info("search_no_result query=%r", query)
            raise NotFoundError("no result")

        records = [
            RecipeSearchService.trim(client.get_information(recipe_id), placeholder_image)
            for recipe_id in ids
        ]
        logger.info("search_ok query=%r results=%d", query, len(records))
        return records
