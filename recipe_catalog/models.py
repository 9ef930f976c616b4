from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class Ingredient:
    """A single ingredient line, e.g. ``Yogurt`` / ``1 cup``."""

    id: str
    name: str
    quantity: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id))
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Ingredient '{self.id}' must have a name.")

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "quantity": self.quantity}


@dataclass(frozen=True)
class Recipe:
    """Domain object representing a catalogued recipe.

    ``ingredient_ids`` may reference ingredients that do not exist; those
    references resolve to nothing.
    """

    id: str
    name: str
    cook_time: int
    difficulty: str
    steps: Optional[str] = None
    ingredient_ids: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "ingredient_ids", _as_id_tuple(self.ingredient_ids))
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Recipe '{self.id}' must have a name.")
        if isinstance(self.cook_time, bool) or not isinstance(self.cook_time, int):
            raise ValueError(f"Recipe '{self.id}' cook time must be whole minutes: {self.cook_time!r}")
        if self.cook_time < 0:
            raise ValueError(f"Recipe '{self.id}' has a negative cook time: {self.cook_time}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "steps": self.steps,
            "cookTime": self.cook_time,
            "difficulty": self.difficulty,
            "ingredientIds": list(self.ingredient_ids),
        }


def _as_id_tuple(ids: Iterable[Any]) -> Tuple[str, ...]:
    return tuple(str(value) for value in ids)


__all__ = ["Ingredient", "Recipe"]
