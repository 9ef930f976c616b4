from __future__ import annotations

from typing import Any, Iterable, List, Optional, Protocol, Tuple, TypeVar

from .models import Ingredient, Recipe


class RecipeRepository(Protocol):
    """Protocol describing the read-only recipe queries used by the catalog."""

    def get_recipe_by_id(self, recipe_id: Any) -> Optional[Recipe]:
        """Return the recipe with ``str(recipe_id)`` or ``None`` if missing."""

    def get_all_recipes(self) -> List[Recipe]:
        """Return every recipe in store order."""

    def search_recipes(self, query: str) -> List[Recipe]:
        """Return recipes whose name contains ``query``, ignoring case."""


class IngredientRepository(Protocol):
    """Protocol describing the read-only ingredient queries used by the catalog."""

    def get_ingredient_by_id(self, ingredient_id: Any) -> Optional[Ingredient]:
        """Return the ingredient with ``str(ingredient_id)`` or ``None`` if missing."""

    def get_ingredients_by_ids(self, ingredient_ids: Iterable[Any]) -> List[Ingredient]:
        """Return known ingredients among ``ingredient_ids`` in store order."""


_Record = TypeVar("_Record", Recipe, Ingredient)


def _freeze(records: Iterable[_Record], kind: str) -> Tuple[_Record, ...]:
    frozen = tuple(records)
    seen = set()
    for record in frozen:
        if record.id in seen:
            raise ValueError(f"Duplicate {kind} id '{record.id}'.")
        seen.add(record.id)
    return frozen


class IngredientStore(IngredientRepository):
    """Immutable, ordered collection of ingredients."""

    def __init__(self, ingredients: Iterable[Ingredient]) -> None:
        self._ingredients = _freeze(ingredients, "ingredient")
        self._by_id = {ingredient.id: ingredient for ingredient in self._ingredients}

    def __len__(self) -> int:
        return len(self._ingredients)

    def get_ingredient_by_id(self, ingredient_id: Any) -> Optional[Ingredient]:
        return self._by_id.get(str(ingredient_id))

    def get_ingredients_by_ids(self, ingredient_ids: Iterable[Any]) -> List[Ingredient]:
        # Output follows store order, not the order of the request.
        wanted = {str(ingredient_id) for ingredient_id in ingredient_ids}
        return [ingredient for ingredient in self._ingredients if ingredient.id in wanted]


class RecipeStore(RecipeRepository):
    """Immutable, ordered collection of recipes."""

    def __init__(self, recipes: Iterable[Recipe]) -> None:
        self._recipes = _freeze(recipes, "recipe")
        self._by_id = {recipe.id: recipe for recipe in self._recipes}

    def __len__(self) -> int:
        return len(self._recipes)

    def get_recipe_by_id(self, recipe_id: Any) -> Optional[Recipe]:
        return self._by_id.get(str(recipe_id))

    def get_all_recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def search_recipes(self, query: str) -> List[Recipe]:
        search_term = query.lower()
        return [recipe for recipe in self._recipes if search_term in recipe.name.lower()]


__all__ = [
    "IngredientRepository",
    "IngredientStore",
    "RecipeRepository",
    "RecipeStore",
]
