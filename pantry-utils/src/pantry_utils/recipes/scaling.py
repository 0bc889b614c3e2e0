"""Serving-size scaling for recipe ingredient lists."""

import math
import numbers
from typing import List, Tuple, Union

from pantry_utils.errors import ValidationError
from pantry_utils.ingredients.number_utils import round_half_up
from pantry_utils.recipes.models import Recipe, ScaledIngredient

# --- Constants ---

# Quantities below this get finer display precision
FINE_PRECISION_BELOW = 1
FINE_PRECISION = 2
COARSE_PRECISION = 1

# Smallest value shown for a positive quantity that would round to zero
MIN_DISPLAY_QUANTITY = 0.01


def scale_recipe(recipe: Recipe, target_servings: int) -> List[ScaledIngredient]:
    """Rescale a recipe's ingredients to ``target_servings``.

    Each quantity is multiplied by ``target_servings / base_servings`` and
    then passed through ``format_quantity``. Any positive integer is
    accepted; the UI's slider range (see ``serving_range``) is not enforced
    here.

    Args:
        recipe: Catalog recipe to scale.
        target_servings: Number of servings to scale to.

    Returns:
        Scaled ingredients in recipe order.

    Raises:
        ValidationError: If ``target_servings`` is not a positive integer or
            the recipe's ``base_servings`` is not positive.
    """
    if isinstance(target_servings, bool) or not isinstance(target_servings, numbers.Integral):
        raise ValidationError(
            f"Serving count must be an integer, got {target_servings!r}"
        )
    if target_servings <= 0:
        raise ValidationError(f"Serving count must be positive, got {target_servings}")
    if recipe.base_servings <= 0:
        raise ValidationError(
            f"Recipe {recipe.id!r} has non-positive base servings: {recipe.base_servings}"
        )

    multiplier = int(target_servings) / recipe.base_servings
    return [
        ScaledIngredient(
            name=ingredient.name,
            quantity=format_quantity(ingredient.quantity * multiplier),
            unit=ingredient.unit,
        )
        for ingredient in recipe.ingredients
    ]


def format_quantity(quantity: float) -> Union[int, float]:
    """Round a scaled quantity for display.

    Amounts under 1 keep two decimals, whole amounts become integers and
    everything else keeps one decimal. Ties round up, matching a
    ``toFixed``-style formatter.

    Examples:
        >>> format_quantity(1 / 3)
        0.33
        >>> format_quantity(4.0)
        4
        >>> format_quantity(2.25)
        2.3
    """
    if quantity < FINE_PRECISION_BELOW:
        rounded = round_half_up(quantity, FINE_PRECISION)
        if quantity > 0 and rounded == 0:
            return MIN_DISPLAY_QUANTITY
        return rounded
    if float(quantity).is_integer():
        return int(quantity)
    return round_half_up(quantity, COARSE_PRECISION)


def serving_range(recipe: Recipe) -> Tuple[int, int]:
    """Return the ``(minimum, maximum)`` serving counts offered to the user.

    The range runs from half the base servings (at least 1) to double.
    """
    return max(1, math.ceil(recipe.base_servings / 2)), recipe.base_servings * 2
