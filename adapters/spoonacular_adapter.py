"""Spoonacular API client used by the recipe search gateway.

Both calls surface every transport, status and decoding failure as
``UpstreamServiceError`` so the caller can abort the whole search.
"""

import logging
from typing import Any, Dict, List

import httpx

from app.exceptions import UpstreamServiceError

logger = logging.getLogger("cookbook.spoonacular")


class SpoonacularClient:
    """Thin wrapper over the ``complexSearch`` and ``information`` endpoints."""

    def __init__(self, api_key: str, base_url: str, client: httpx.Client):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.client = client

    def search_ids(self, query: str, number: int = 3) -> List[int]:
        """Ids of up to ``number`` recipes matching ``query``, in ranking order.

        Args:
            query: free text query
            number: maximum number of ids

        Returns:
            List of Spoonacular recipe ids (possibly empty)

        Raises:
            UpstreamServiceError: If the call or the response parsing fails
        """
        params = {
            "apiKey": self.api_key,
            "query": query,
            "number": number,
            "instructionsRequired": "true",
        }
        data = self._get_json(f"{self.base_url}/complexSearch", params)
        try:
            ids = [result["id"] for result in data["results"]]
        except (KeyError, TypeError) as e:
            logger.error("Unexpected complexSearch payload for %r: %s", query, e)
            raise UpstreamServiceError(
                "Recipe search returned an unexpected payload", details={"error": str(e)}
            ) from e
        logger.debug("complexSearch %r returned %d ids", query, len(ids))
        return ids[:number]

    def get_information(self, recipe_id: int) -> Dict[str, Any]:
        """Full recipe record for ``recipe_id``"""
        data = self._get_json(
            f"{self.base_url}/{recipe_id}/information", {"apiKey": self.api_key}
        )
        if not isinstance(data, dict):
            raise UpstreamServiceError(
                "Recipe details returned an unexpected payload",
                details={"recipe_id": recipe_id},
            )
        return data

    def _get_json(self, url: str, params: Dict[str, Any]) -> Any:
        try:
            response = self.client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Spoonacular HTTP error %s on %s", e.response.status_code, url)
            raise UpstreamServiceError(
                "Recipe service returned an error",
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            logger.error("Spoonacular request failed on %s: %s", url, e)
            raise UpstreamServiceError(
                "Recipe service unavailable", details={"error": str(e)}
            ) from e
        except ValueError as e:
            logger.error("Spoonacular response on %s is not JSON: %s", url, e)
            raise UpstreamServiceError(
                "Recipe service returned invalid JSON", details={"error": str(e)}
            ) from e
