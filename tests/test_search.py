"""
Tests for the recipe search gateway.

Spoonacular is replaced by an httpx.MockTransport so every upstream call
is observable.
"""

import httpx
import pytest

from test_fixtures import client, make_spoon_recipe, spoonacular_transport
from adapters import SpoonacularClient
from api.dependencies import get_spoonacular
from app.exceptions import NotFoundError, UpstreamServiceError
from main import app
from services.recipe_search_service import STRIPPED_FIELDS, RecipeSearchService

BASE_URL = "https://api.spoonacular.com/recipes"
PLACEHOLDER = "assets/images/Cook-Book-placeholder.png"


def make_client(transport: httpx.MockTransport) -> SpoonacularClient:
    return SpoonacularClient("test-key", BASE_URL, httpx.Client(transport=transport))


@pytest.fixture
def use_spoonacular():
    """Install a SpoonacularClient override for the route tests"""

    def install(transport: httpx.MockTransport) -> None:
        app.dependency_overrides[get_spoonacular] = lambda: make_client(transport)

    yield install
    app.dependency_overrides.clear()


def test_search_returns_details_in_ranking_order():
    details = {
        3: make_spoon_recipe(3, "Third"),
        1: make_spoon_recipe(1, "First"),
        2: make_spoon_recipe(2, "Second"),
    }
    calls = []
    spoon = make_client(
        spoonacular_transport([{"id": 3}, {"id": 1}, {"id": 2}], details, calls)
    )

    recipes = RecipeSearchService.search(spoon, "pancake", 3, PLACEHOLDER)

    assert [r["id"] for r in recipes] == [3, 1, 2]
    assert calls == [
        "/recipes/complexSearch",
        "/recipes/3/information",
        "/recipes/1/information",
        "/recipes/2/information",
    ]


def test_search_strips_fields_and_collapses_cards():
    spoon = make_client(spoonacular_transport([{"id": 5}], {5: make_spoon_recipe(5)}))

    [recipe] = RecipeSearchService.search(spoon, "pancake", 3, PLACEHOLDER)

    assert recipe["showDetails"] is False
    assert not set(STRIPPED_FIELDS) & set(recipe)
    assert recipe["readyInMinutes"] == 25
    assert recipe["extendedIngredients"][0]["name"] == "flour"


def test_search_uses_placeholder_when_image_missing():
    record = make_spoon_recipe(8)
    del record["image"]
    spoon = make_client(spoonacular_transport([{"id": 8}], {8: record}))

    [recipe] = RecipeSearchService.search(spoon, "soup", 3, PLACEHOLDER)

    assert recipe["image"] == PLACEHOLDER


def test_search_sends_query_parameters():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return httpx.Response(200, json={"results": []})

    spoon = make_client(httpx.MockTransport(handler))

    with pytest.raises(NotFoundError):
        RecipeSearchService.search(spoon, "green curry", 3, PLACEHOLDER)

    params = seen[0].params
    assert params["apiKey"] == "test-key"
    assert params["query"] == "green curry"
    assert params["number"] == "3"
    assert params["instructionsRequired"] == "true"


def test_no_results_is_not_found():
    spoon = make_client(spoonacular_transport([], {}))

    with pytest.raises(NotFoundError) as exc_info:
        RecipeSearchService.search(spoon, "zzzz", 3, PLACEHOLDER)

    assert exc_info.value.message == "no result"


def test_failed_detail_call_aborts_search():
    calls = []
    spoon = make_client(
        spoonacular_transport([{"id": 1}, {"id": 404}, {"id": 2}], {1: make_spoon_recipe(1), 2: make_spoon_recipe(2)}, calls)
    )

    with pytest.raises(UpstreamServiceError):
        RecipeSearchService.search(spoon, "pancake", 3, PLACEHOLDER)

    assert "/recipes/2/information" not in calls


def test_transport_failure_is_upstream_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    spoon = make_client(httpx.MockTransport(handler))

    with pytest.raises(UpstreamServiceError):
        spoon.search_ids("pancake")


def test_invalid_json_is_upstream_error():
    spoon = make_client(httpx.MockTransport(lambda request: httpx.Response(200, text="<html>")))

    with pytest.raises(UpstreamServiceError):
        spoon.search_ids("pancake")


def test_search_route(use_spoonacular):
    use_spoonacular(
        spoonacular_transport([{"id": 1}, {"id": 2}], {1: make_spoon_recipe(1, "A"), 2: make_spoon_recipe(2, "B")})
    )

    r = client.get("/api/spoon", params={"q": "pancake"})

    assert r.status_code == 200
    assert [rec["title"] for rec in r.json()["r"]] == ["A", "B"]


def test_search_route_no_result(use_spoonacular):
    use_spoonacular(spoonacular_transport([], {}))

    r = client.get("/api/spoon", params={"q": "zzzz"})

    assert r.status_code == 404
    assert r.json()["error"]["message"] == "no result"


def test_search_route_upstream_failure(use_spoonacular):
    use_spoonacular(httpx.MockTransport(lambda request: httpx.Response(503)))

    r = client.get("/api/spoon", params={"q": "pancake"})

    assert r.status_code == 500
    body = r.json()
    assert body["error"]["code"] == "UPSTREAM_ERROR"
    assert "r" not in body


def test_search_route_requires_query(use_spoonacular):
    use_spoonacular(spoonacular_transport([], {}))

    r = client.get("/api/spoon")

    assert r.status_code == 422
