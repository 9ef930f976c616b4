"""Static seed data loaded once at startup."""

from .catalog import RecipeCatalog
from .models import Ingredient, Recipe
from .storage import IngredientStore, RecipeStore


SEED_RECIPES = (
    Recipe(
        id="1",
        name="Chicken Tikka Masala",
        steps=(
            "1. Marinate chicken in yogurt and spices\n"
            "2. Grill chicken until charred\n"
            "3. Make tomato-cream sauce\n"
            "4. Combine and simmer"
        ),
        cook_time=45,
        difficulty="medium",
        ingredient_ids=("1", "2", "3", "4"),
    ),
    Recipe(
        id="2",
        name="Spaghetti Carbonara",
        steps=(
            "1. Cook spaghetti\n"
            "2. Fry pancetta\n"
            "3. Mix eggs and cheese\n"
            "4. Combine while hot"
        ),
        cook_time=20,
        difficulty="easy",
        ingredient_ids=("5", "6", "7", "8"),
    ),
    Recipe(
        id="3",
        name="Beef Tacos",
        steps=(
            "1. Season and cook ground beef\n"
            "2. Warm tortillas\n"
            "3. Assemble with toppings"
        ),
        cook_time=15,
        difficulty="easy",
        ingredient_ids=("9", "10", "11", "12"),
    ),
    Recipe(
        id="4",
        name="Vegetable Stir Fry",
        steps=None,
        cook_time=15,
        difficulty="easy",
        ingredient_ids=("13", "14", "15", "16"),
    ),
)


SEED_INGREDIENTS = (
    Ingredient(id="1", name="Chicken", quantity="1 lb"),
    Ingredient(id="2", name="Yogurt", quantity="1 cup"),
    Ingredient(id="3", name="Tomato Sauce", quantity="2 cups"),
    Ingredient(id="4", name="Cream", quantity="1/2 cup"),
    Ingredient(id="5", name="Spaghetti", quantity="1 lb"),
    Ingredient(id="6", name="Pancetta", quantity="200g"),
    Ingredient(id="7", name="Eggs", quantity="4"),
    Ingredient(id="8", name="Parmesan Cheese", quantity="1 cup"),
    Ingredient(id="9", name="Ground Beef", quantity="1 lb"),
    Ingredient(id="10", name="Tortillas", quantity="8"),
    Ingredient(id="11", name="Lettuce", quantity="1 head"),
    Ingredient(id="12", name="Salsa", quantity="to taste"),
    Ingredient(id="13", name="Broccoli", quantity="2 cups"),
    Ingredient(id="14", name="Bell Peppers", quantity="2"),
    Ingredient(id="15", name="Soy Sauce", quantity="3 tbsp"),
    Ingredient(id="16", name="Garlic", quantity="4 cloves"),
)


def build_seed_catalog() -> RecipeCatalog:
    return RecipeCatalog(
        recipes=RecipeStore(SEED_RECIPES),
        ingredients=IngredientStore(SEED_INGREDIENTS),
    )


__all__ = ["SEED_INGREDIENTS", "SEED_RECIPES", "build_seed_catalog"]
