"""Loading the static recipe catalog."""

import json
import logging
import os
import pathlib
from typing import Any, Mapping, Optional, Tuple, Union

from pantry_utils.errors import ValidationError
from pantry_utils.recipes.models import Recipe, RecipeIngredient

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "data", "recipes.json")


def load_catalog(path: Optional[Union[str, pathlib.Path]] = None) -> Tuple[Recipe, ...]:
    """Load the recipe catalog from a JSON file.

    The file holds a list of recipe records with the keys ``id``, ``name``,
    ``cuisine``, ``description``, ``tags``, ``baseServings``,
    ``ingredients`` (each with ``name``, ``quantity``, ``unit``) and
    ``instructions``.

    Args:
        path: Catalog file to read. Defaults to the catalog bundled with the
            package.

    Returns:
        The recipes in file order.

    Raises:
        ValidationError: If a record is invalid or two recipes share an id.
    """
    path = path or DEFAULT_CATALOG_PATH
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValidationError(f"Catalog {path} must contain a list of recipes")

    recipes = []
    seen_ids = set()
    for record in records:
        recipe = recipe_from_dict(record)
        if recipe.id in seen_ids:
            raise ValidationError(f"Duplicate recipe id {recipe.id!r} in {path}")
        seen_ids.add(recipe.id)
        recipes.append(recipe)

    logger.info(f"Loaded {len(recipes)} recipes from {path}")
    return tuple(recipes)


def recipe_from_dict(record: Mapping[str, Any]) -> Recipe:
    """Build a Recipe from one catalog record, validating its numbers.

    Raises:
        ValidationError: If a required key is missing, ``baseServings`` is
            below 1 or an ingredient quantity is not positive.
    """
    recipe_id = record.get("id", "<unknown>")
    try:
        base_servings = record["baseServings"]
        if isinstance(base_servings, bool) or not isinstance(base_servings, int):
            raise ValidationError(
                f"Recipe {recipe_id!r}: baseServings must be an integer, got {base_servings!r}"
            )
        if base_servings < 1:
            raise ValidationError(
                f"Recipe {recipe_id!r}: baseServings must be at least 1, got {base_servings}"
            )

        ingredients = tuple(
            _ingredient_from_dict(recipe_id, ingredient)
            for ingredient in record["ingredients"]
        )
        return Recipe(
            id=str(record["id"]),
            name=record["name"],
            cuisine=record.get("cuisine", ""),
            description=record.get("description", ""),
            tags=tuple(record.get("tags", ())),
            base_servings=base_servings,
            ingredients=ingredients,
            instructions=tuple(record.get("instructions", ())),
        )
    except KeyError as e:
        raise ValidationError(f"Recipe {recipe_id!r} is missing required key {e}") from e


def _ingredient_from_dict(recipe_id: str, record: Mapping[str, Any]) -> RecipeIngredient:
    quantity = record["quantity"]
    if isinstance(quantity, bool) or not isinstance(quantity, (int, float)) or not quantity > 0:
        raise ValidationError(
            f"Recipe {recipe_id!r}: ingredient {record.get('name')!r} "
            f"needs a positive quantity, got {quantity!r}"
        )
    return RecipeIngredient(
        name=record["name"], quantity=float(quantity), unit=record.get("unit", "")
    )
