import os
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import NotFound

from .catalog import RecipeCatalog
from .models import Ingredient, Recipe
from .seed import build_seed_catalog

try:
    from .gcp_storage import FirestoreCatalogLoader
except ImportError:  # pragma: no cover - allows running tests without optional deps
    FirestoreCatalogLoader = None  # type: ignore[assignment,misc]

DATA_SOURCES = ("seed", "firestore")


def create_app(catalog: Optional[RecipeCatalog] = None) -> Flask:
    """Create and configure the Flask application.

    Parameters
    ----------
    catalog:
        Optional recipe catalog. When ``None`` the catalog is built from the
        source named by ``RECIPE_DATA_SOURCE`` (``seed`` or ``firestore``).
    """

    app = Flask(__name__)
    app.json.sort_keys = False

    if catalog is None:
        catalog = _catalog_from_env()
    app.config["RECIPE_CATALOG"] = catalog
    app.config["STARTED_AT"] = time.monotonic()

    def _catalog() -> RecipeCatalog:
        return app.config["RECIPE_CATALOG"]

    def _include_ingredients() -> bool:
        include = request.args.get("include", "")
        return "ingredients" in {part.strip() for part in include.split(",")}

    def _recipe_payload(recipe: Recipe, with_ingredients: bool) -> Dict[str, Any]:
        payload = recipe.to_dict()
        if with_ingredients:
            ingredients = _catalog().ingredients_for(recipe)
            app.logger.info("Resolved %d ingredients", len(ingredients))
            payload["ingredients"] = [ingredient.to_dict() for ingredient in ingredients]
        return payload

    @app.errorhandler(NotFound)
    def not_found(exc: NotFound):
        return jsonify(error=exc.description), 404

    @app.get("/")
    def index():
        return jsonify(
            message="Recipe Catalog API",
            endpoints={
                "recipes": "GET /recipes",
                "recipe": "GET /recipes/<id>",
                "search": "GET /recipes/search?query=<text>",
                "ingredients": "GET /recipes/<id>/ingredients",
                "ingredient": "GET /ingredients/<id>",
                "health": "GET /health",
                "pid": "GET /pid",
            },
            documentation="Add ?include=ingredients to any recipe endpoint to embed ingredients",
        )

    @app.get("/health")
    def health():
        return jsonify(
            status="ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            uptime=time.monotonic() - app.config["STARTED_AT"],
            pid=os.getpid(),
        )

    @app.get("/pid")
    def pid():
        app.logger.info("pid() called")
        return jsonify(pid=os.getpid())

    @app.get("/recipes")
    def list_recipes():
        recipes = _catalog().get_all_recipes()
        app.logger.info("Returning %d recipes", len(recipes))
        with_ingredients = _include_ingredients()
        return jsonify([_recipe_payload(recipe, with_ingredients) for recipe in recipes])

    @app.get("/recipes/search")
    def search_recipes():
        query = request.args.get("query", "")
        app.logger.info("searchRecipes(query=%r) called", query)
        results = _catalog().search_recipes(query)
        app.logger.info("Found %d matching recipes", len(results))
        with_ingredients = _include_ingredients()
        return jsonify([_recipe_payload(recipe, with_ingredients) for recipe in results])

    @app.get("/recipes/<recipe_id>")
    def get_recipe(recipe_id: str):
        recipe = _get_recipe_or_404(recipe_id)
        app.logger.info("Found recipe: %s", recipe.name)
        return jsonify(_recipe_payload(recipe, _include_ingredients()))

    @app.get("/recipes/<recipe_id>/ingredients")
    def recipe_ingredients(recipe_id: str):
        recipe = _get_recipe_or_404(recipe_id)
        ingredients = _catalog().ingredients_for(recipe)
        return jsonify([ingredient.to_dict() for ingredient in ingredients])

    @app.get("/ingredients/<ingredient_id>")
    def get_ingredient(ingredient_id: str):
        ingredient: Optional[Ingredient] = _catalog().get_ingredient_by_id(ingredient_id)
        if ingredient is None:
            raise NotFound(f"Ingredient '{ingredient_id}' not found.")
        return jsonify(ingredient.to_dict())

    def _get_recipe_or_404(recipe_id: str) -> Recipe:
        app.logger.info("recipe(id=%s) called", recipe_id)
        recipe = _catalog().get_recipe_by_id(recipe_id)
        if recipe is None:
            app.logger.info("Recipe %s not found", recipe_id)
            raise NotFound(f"Recipe '{recipe_id}' not found.")
        return recipe

    return app


def _catalog_from_env() -> RecipeCatalog:
    source = os.environ.get("RECIPE_DATA_SOURCE", "seed").strip().lower()

    if source not in DATA_SOURCES:
        raise RuntimeError(
            f"Unknown RECIPE_DATA_SOURCE '{source}'. Expected one of: {', '.join(DATA_SOURCES)}."
        )

    if source == "seed":
        return build_seed_catalog()

    if FirestoreCatalogLoader is None:
        raise RuntimeError(
            "google-cloud-firestore is not installed. Install optional dependencies "
            "or pass an explicit catalog to create_app."
        )
    return FirestoreCatalogLoader.from_env().load()


__all__ = ["create_app", "Ingredient", "Recipe", "RecipeCatalog"]
