"""
Tests for saved recipes (use case: save a search result, list saved recipes).

Covers:
- idempotent save keyed by the external recipe id
- newest-first listing
- duplicate key from a concurrent save reported as "not saved"
- route error mapping
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from pymongo.errors import DuplicateKeyError

from test_fixtures import client, make_spoon_recipe
from domain.schemas.recipe_schemas import RecipeDocument
from repositories import RecipeRepository
from services.recipe_service import RecipeService


def test_saving_same_recipe_twice_stores_one_document(mongo_db):
    recipe = RecipeDocument.model_validate(make_spoon_recipe(716429))

    first = RecipeService.save_recipe(mongo_db, recipe)
    second = RecipeService.save_recipe(mongo_db, recipe)

    assert first["acknowledged"] is True
    assert first["insertedId"]
    assert second == {"msg": "data already exists, not saved"}
    assert mongo_db["recipes"].count_documents({"id": 716429}) == 1


def test_saved_recipe_keeps_client_fields_and_gets_timestamp(mongo_db):
    recipe = RecipeDocument.model_validate({"id": 42, "title": "Soup", "showDetails": True})

    RecipeService.save_recipe(mongo_db, recipe)
    doc = mongo_db["recipes"].find_one({"id": 42})

    assert doc["title"] == "Soup"
    assert doc["showDetails"] is True
    assert isinstance(doc["ts"], datetime)
    assert "image" not in doc


def test_duplicate_key_on_insert_is_not_saved(mongo_db):
    recipe = RecipeDocument.model_validate({"id": 7, "title": "Race"})

    with patch.object(RecipeRepository, "insert", side_effect=DuplicateKeyError("dup")):
        result = RecipeService.save_recipe(mongo_db, recipe)

    assert result == {"msg": "data already exists, not saved"}


def test_unique_index_rejects_second_insert(mongo_db):
    repo = RecipeRepository(mongo_db)
    repo.ensure_indexes()
    repo.insert({"id": 1, "title": "One"})

    recipe = RecipeDocument.model_validate({"id": 1, "title": "One again"})
    with patch.object(RecipeRepository, "find_by_external_id", return_value=None):
        result = RecipeService.save_recipe(mongo_db, recipe)

    assert result == {"msg": "data already exists, not saved"}
    assert mongo_db["recipes"].count_documents({"id": 1}) == 1


def test_list_recipes_newest_first(mongo_db):
    now = datetime.now(timezone.utc)
    mongo_db["recipes"].insert_many(
        [
            {"id": 1, "title": "old", "ts": now - timedelta(days=2)},
            {"id": 2, "title": "new", "ts": now},
            {"id": 3, "title": "mid", "ts": now - timedelta(days=1)},
        ]
    )

    recipes = RecipeService.list_recipes(mongo_db)

    assert [r["title"] for r in recipes] == ["new", "mid", "old"]
    assert all(isinstance(r["_id"], str) for r in recipes)


def test_recipe_routes_save_and_list(stores):
    body = {"recipe": make_spoon_recipe(716429, title="Pasta")}

    r1 = client.post("/api/recipe", json=body)
    r2 = client.post("/api/recipe", json=body)
    r3 = client.get("/api/recipe")

    assert r1.status_code == 200
    assert r1.json()["acknowledged"] is True
    assert r2.status_code == 200
    assert r2.json() == {"msg": "data already exists, not saved"}
    assert r3.status_code == 200
    assert [r["title"] for r in r3.json()] == ["Pasta"]


def test_save_recipe_requires_id(stores):
    r = client.post("/api/recipe", json={"recipe": {"title": "No id"}})

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_list_recipes_store_failure(stores, monkeypatch):
    def boom(mongo_db):
        raise RuntimeError("server selection timeout")

    monkeypatch.setattr(RecipeService, "list_recipes", boom)

    r = client.get("/api/recipe")

    assert r.status_code == 500
    assert "server selection timeout" in r.json()["error"]["message"]


def test_client_document_id_is_ignored(mongo_db):
    recipe = RecipeDocument.model_validate({"id": 5, "_id": "abc", "title": "Tart"})

    result = RecipeService.save_recipe(mongo_db, recipe)
    doc = mongo_db["recipes"].find_one({"id": 5})

    assert doc["_id"] != "abc"
    assert str(doc["_id"]) == result["insertedId"]
    assert mongo_db["recipes"].find_one({"_id": "abc"}) is None
