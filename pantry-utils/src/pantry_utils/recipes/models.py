import dataclasses
from typing import Tuple

from pantry_utils.ingredients.normalization import normalize_item_name


@dataclasses.dataclass(frozen=True)
class RecipeIngredient:
    name: str
    quantity: float
    unit: str


@dataclasses.dataclass(frozen=True)
class Recipe:
    """A read-only catalog recipe."""

    id: str
    name: str
    cuisine: str
    description: str
    tags: Tuple[str, ...]
    base_servings: int
    ingredients: Tuple[RecipeIngredient, ...]
    instructions: Tuple[str, ...]

    @property
    def ingredient_names(self) -> Tuple[str, ...]:
        """Ingredient names in recipe order, one per normalized name.

        The first spelling of a name wins, so "Egg" and "egg" count once.
        """
        names = {}
        for ingredient in self.ingredients:
            names.setdefault(normalize_item_name(ingredient.name), ingredient.name)
        return tuple(names.values())


@dataclasses.dataclass(frozen=True)
class Recommendation:
    """A recipe scored against one pantry snapshot.

    ``matched_ingredients`` and ``missing_ingredients`` partition the
    recipe's ingredient names; both keep recipe order.
    """

    recipe: Recipe
    matched_ingredients: Tuple[str, ...]
    missing_ingredients: Tuple[str, ...]
    score: float


@dataclasses.dataclass(frozen=True)
class ScaledIngredient:
    name: str
    quantity: float  # display value after rounding
    unit: str
