"""Recipe catalog, matching and serving scaling utilities."""

from .catalog import DEFAULT_CATALOG_PATH, load_catalog, recipe_from_dict
from .models import Recipe, RecipeIngredient, Recommendation, ScaledIngredient
from .reporting import recommendations_to_dataframe, scaled_ingredients_to_dataframe
from .scaling import format_quantity, scale_recipe, serving_range
from .scoring import score_recipe, score_recipes

__all__ = [
    "Recipe",
    "RecipeIngredient",
    "Recommendation",
    "ScaledIngredient",
    "DEFAULT_CATALOG_PATH",
    "load_catalog",
    "recipe_from_dict",
    "score_recipe",
    "score_recipes",
    "scale_recipe",
    "format_quantity",
    "serving_range",
    "recommendations_to_dataframe",
    "scaled_ingredients_to_dataframe",
]
