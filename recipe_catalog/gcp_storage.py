from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

from google.cloud import firestore
from google.cloud.firestore_v1.field_path import FieldPath

from .catalog import RecipeCatalog
from .models import Ingredient, Recipe
from .storage import IngredientStore, RecipeStore


logger = logging.getLogger(__name__)


class FirestoreCatalogLoader:
    """Reads recipes and ingredients from Firestore into immutable stores.

    Documents are read once, when :meth:`load` is called. The returned
    catalog never goes back to Firestore, so edits made afterwards are only
    picked up by a restart.
    """

    def __init__(
        self,
        *,
        project: Optional[str] = None,
        recipes_collection: str = "recipes",
        ingredients_collection: str = "ingredients",
        client: Optional[firestore.Client] = None,
    ) -> None:
        self._project = project
        self._recipes_collection = recipes_collection
        self._ingredients_collection = ingredients_collection
        self._firestore_client = client if client is not None else firestore.Client(project=project)

    @classmethod
    def from_env(cls) -> "FirestoreCatalogLoader":
        """Build a loader from environment variables."""

        project = os.environ.get("GCP_PROJECT")
        recipes_collection = os.environ.get("RECIPES_COLLECTION", "recipes")
        ingredients_collection = os.environ.get("INGREDIENTS_COLLECTION", "ingredients")
        return cls(
            project=project,
            recipes_collection=recipes_collection,
            ingredients_collection=ingredients_collection,
        )

    def load(self) -> RecipeCatalog:
        recipes = [
            self._doc_to_recipe(doc.id, doc.to_dict() or {})
            for doc in self._stream(self._recipes_collection)
        ]
        ingredients = [
            self._doc_to_ingredient(doc.id, doc.to_dict() or {})
            for doc in self._stream(self._ingredients_collection)
        ]
        logger.info(
            "Loaded %d recipes from '%s' and %d ingredients from '%s' (project %s)",
            len(recipes),
            self._recipes_collection,
            len(ingredients),
            self._ingredients_collection,
            self._project or "default",
        )
        return RecipeCatalog(
            recipes=RecipeStore(recipes),
            ingredients=IngredientStore(ingredients),
        )

    def _stream(self, collection_name: str):
        # Document ids give a stable order that matches the seed layout.
        collection = self._firestore_client.collection(collection_name)
        return collection.order_by(FieldPath.document_id()).stream()

    def _doc_to_recipe(self, doc_id: str, data: dict) -> Recipe:
        ingredient_ids = data.get("ingredientIds")
        if isinstance(ingredient_ids, list):
            parsed_ids: List[Any] = ingredient_ids
        else:
            parsed_ids = []

        cook_time = data.get("cookTime")
        if isinstance(cook_time, bool) or not isinstance(cook_time, int):
            cook_time = 0

        return Recipe(
            id=doc_id,
            name=data.get("name", ""),
            steps=data.get("steps"),
            cook_time=cook_time,
            difficulty=data.get("difficulty", ""),
            ingredient_ids=tuple(parsed_ids),
        )

    def _doc_to_ingredient(self, doc_id: str, data: dict) -> Ingredient:
        return Ingredient(
            id=doc_id,
            name=data.get("name", ""),
            quantity=data.get("quantity", ""),
        )


__all__ = ["FirestoreCatalogLoader"]
