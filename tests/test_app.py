from __future__ import annotations

from pathlib import Path
import os
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from recipe_catalog import create_app
from recipe_catalog.catalog import RecipeCatalog
from recipe_catalog.models import Ingredient, Recipe
from recipe_catalog.seed import SEED_INGREDIENTS, SEED_RECIPES, build_seed_catalog
from recipe_catalog.storage import IngredientStore, RecipeStore


class CountingCatalog(RecipeCatalog):
    """Catalog that records how often ingredients are resolved."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.resolved: list[str] = []

    def ingredients_for(self, recipe: Recipe) -> list[Ingredient]:
        self.resolved.append(recipe.id)
        return super().ingredients_for(recipe)


def create_test_client(catalog: RecipeCatalog | None = None):
    catalog = catalog if catalog is not None else build_seed_catalog()
    app = create_app(catalog=catalog)
    app.config.update(TESTING=True)
    return app.test_client(), catalog


def test_index_lists_endpoints():
    client, _ = create_test_client()

    response = client.get("/")

    assert response.status_code == 200
    body = response.get_json()
    assert body["message"] == "Recipe Catalog API"
    assert "GET /recipes" in body["endpoints"].values()


def test_health_reports_process_details():
    client, _ = create_test_client()

    response = client.get("/health")

    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] == "ok"
    assert body["pid"] == os.getpid()
    assert body["uptime"] >= 0
    assert body["timestamp"]


def test_pid_endpoint():
    client, _ = create_test_client()

    response = client.get("/pid")

    assert response.get_json() == {"pid": os.getpid()}


def test_list_recipes_returns_seed_order():
    client, _ = create_test_client()

    response = client.get("/recipes")

    assert response.status_code == 200
    recipes = response.get_json()
    assert [recipe["id"] for recipe in recipes] == ["1", "2", "3", "4"]
    assert recipes[3]["steps"] is None
    assert "ingredients" not in recipes[0]


def test_get_recipe_by_id():
    client, _ = create_test_client()

    response = client.get("/recipes/1")

    assert response.status_code == 200
    recipe = response.get_json()
    assert recipe["name"] == "Chicken Tikka Masala"
    assert recipe["cookTime"] == 45
    assert recipe["difficulty"] == "medium"
    assert recipe["ingredientIds"] == ["1", "2", "3", "4"]


def test_missing_recipe_is_404():
    client, _ = create_test_client()

    response = client.get("/recipes/999")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Recipe '999' not found."}


def test_ingredients_resolved_only_when_requested():
    catalog = CountingCatalog(
        recipes=RecipeStore(SEED_RECIPES),
        ingredients=IngredientStore(SEED_INGREDIENTS),
    )
    client, _ = create_test_client(catalog)

    client.get("/recipes/1")
    assert catalog.resolved == []

    response = client.get("/recipes/1?include=ingredients")

    assert catalog.resolved == ["1"]
    ingredients = response.get_json()["ingredients"]
    assert [ingredient["name"] for ingredient in ingredients] == [
        "Chicken",
        "Yogurt",
        "Tomato Sauce",
        "Cream",
    ]
    assert ingredients[1] == {"id": "2", "name": "Yogurt", "quantity": "1 cup"}


def test_list_recipes_can_embed_ingredients():
    client, _ = create_test_client()

    response = client.get("/recipes?include=ingredients")

    recipes = response.get_json()
    assert all(len(recipe["ingredients"]) == 4 for recipe in recipes)
    assert recipes[1]["ingredients"][0]["name"] == "Spaghetti"


def test_recipe_ingredients_endpoint_drops_unknown_ids():
    catalog = RecipeCatalog(
        recipes=RecipeStore(
            [Recipe(id="1", name="Toast", cook_time=3, difficulty="easy", ingredient_ids=("1", "999"))]
        ),
        ingredients=IngredientStore([Ingredient(id="1", name="Bread", quantity="2 slices")]),
    )
    client, _ = create_test_client(catalog)

    response = client.get("/recipes/1/ingredients")

    assert response.status_code == 200
    assert response.get_json() == [{"id": "1", "name": "Bread", "quantity": "2 slices"}]


def test_recipe_ingredients_for_missing_recipe_is_404():
    client, _ = create_test_client()

    response = client.get("/recipes/999/ingredients")

    assert response.status_code == 404


@pytest.mark.parametrize("query", ["chicken", "CHICKEN", "Chicken"])
def test_search_is_case_insensitive(query):
    client, _ = create_test_client()

    response = client.get("/recipes/search", query_string={"query": query})

    assert response.status_code == 200
    assert [recipe["id"] for recipe in response.get_json()] == ["1"]


def test_search_without_query_returns_everything():
    client, _ = create_test_client()

    response = client.get("/recipes/search")

    assert len(response.get_json()) == 4


def test_get_ingredient_by_id():
    client, _ = create_test_client()

    found = client.get("/ingredients/12")
    missing = client.get("/ingredients/999")

    assert found.get_json() == {"id": "12", "name": "Salsa", "quantity": "to taste"}
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Ingredient '999' not found."}


def test_unknown_route_returns_json_error():
    client, _ = create_test_client()

    response = client.get("/nope")

    assert response.status_code == 404
    assert "error" in response.get_json()


def test_create_app_uses_seed_catalog_by_default(monkeypatch):
    monkeypatch.delenv("RECIPE_DATA_SOURCE", raising=False)

    app = create_app()

    assert len(app.config["RECIPE_CATALOG"].get_all_recipes()) == 4


def test_create_app_rejects_unknown_data_source(monkeypatch):
    monkeypatch.setenv("RECIPE_DATA_SOURCE", "postgres")

    with pytest.raises(RuntimeError, match="Unknown RECIPE_DATA_SOURCE"):
        create_app()
