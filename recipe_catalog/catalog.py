from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from .models import Ingredient, Recipe
from .storage import IngredientRepository, RecipeRepository


logger = logging.getLogger(__name__)


class RecipeCatalog:
    """Query surface over a recipe store and an ingredient store.

    The catalog holds no state of its own. Both stores are shared read-only,
    so a single instance may serve any number of concurrent requests.
    """

    def __init__(self, *, recipes: RecipeRepository, ingredients: IngredientRepository) -> None:
        self._recipes = recipes
        self._ingredients = ingredients

    def get_recipe_by_id(self, recipe_id: Any) -> Optional[Recipe]:
        recipe = self._recipes.get_recipe_by_id(recipe_id)
        if recipe is None:
            logger.debug("Recipe %s not found", recipe_id)
        return recipe

    def get_all_recipes(self) -> List[Recipe]:
        return self._recipes.get_all_recipes()

    def search_recipes(self, query: str) -> List[Recipe]:
        results = self._recipes.search_recipes(query)
        logger.debug("Search %r matched %d recipes", query, len(results))
        return results

    def get_ingredient_by_id(self, ingredient_id: Any) -> Optional[Ingredient]:
        return self._ingredients.get_ingredient_by_id(ingredient_id)

    def get_ingredients_by_ids(self, ingredient_ids: Iterable[Any]) -> List[Ingredient]:
        return self._ingredients.get_ingredients_by_ids(ingredient_ids)

    def ingredients_for(self, recipe: Recipe) -> List[Ingredient]:
        """Resolve the ingredients referenced by ``recipe``.

        Unknown ingredient ids are dropped. Nothing is cached, so callers may
        resolve the same recipe as often as they like.
        """

        ingredients = self.get_ingredients_by_ids(recipe.ingredient_ids)
        logger.debug("Resolved %d ingredients for recipe %s", len(ingredients), recipe.id)
        return ingredients


__all__ = ["RecipeCatalog"]
