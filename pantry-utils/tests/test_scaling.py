import numpy as np
import pytest

from pantry_utils.errors import ValidationError
from pantry_utils.recipes.models import Recipe, RecipeIngredient, ScaledIngredient
from pantry_utils.recipes.scaling import format_quantity, scale_recipe, serving_range


def _recipe(base_servings, quantities):
    return Recipe(
        id="test",
        name="Test",
        cuisine="Test",
        description="",
        tags=(),
        base_servings=base_servings,
        ingredients=tuple(
            RecipeIngredient(f"item {n}", quantity, "cup")
            for n, quantity in enumerate(quantities)
        ),
        instructions=(),
    )


def test_scale_to_base_servings_is_identity():
    """Test that scaling to the base serving count only applies display rounding."""
    recipe = _recipe(4, [2, 1 / 3, 1.5, 0.25])
    scaled = scale_recipe(recipe, 4)
    assert [i.quantity for i in scaled] == [2, 0.33, 1.5, 0.25]
    assert isinstance(scaled[0].quantity, int)


def test_scale_returns_name_quantity_unit():
    """Test that scaled entries keep ingredient names, units and order."""
    recipe = Recipe(
        id="toast",
        name="Toast",
        cuisine="",
        description="",
        tags=(),
        base_servings=1,
        ingredients=(
            RecipeIngredient("bread", 2, "slices"),
            RecipeIngredient("butter", 1, "tbsp"),
        ),
        instructions=(),
    )
    assert scale_recipe(recipe, 3) == [
        ScaledIngredient("bread", 6, "slices"),
        ScaledIngredient("butter", 3, "tbsp"),
    ]


@pytest.mark.parametrize(
    "base_servings, target_servings, quantity, expected",
    [
        (4, 8, 1.5, 3),
        (4, 2, 1.5, 0.75),
        (4, 6, 1.5, 2.3),  # 2.25 rounds half up
        (2, 1, 1, 0.5),
        (3, 1, 1, 0.33),
        (3, 2, 1, 0.67),
        (4, 3, 5, 3.8),  # 3.75 rounds half up
        (4, 1, 4, 1),
        (2, 20, 0.5, 5),
        (6, 1, 0.02, 0.01),  # 0.0033 would round to 0
    ],
)
def test_scale_rounding(base_servings, target_servings, quantity, expected):
    """Test the display rounding policy on scaled quantities."""
    [scaled] = scale_recipe(_recipe(base_servings, [quantity]), target_servings)
    assert scaled.quantity == expected


def test_scale_outside_slider_range():
    """Test that serving counts outside the slider range are still scaled."""
    [scaled] = scale_recipe(_recipe(4, [2]), 100)
    assert scaled.quantity == 50


@pytest.mark.parametrize("target_servings", [np.int64(8), np.int32(8)])
def test_scale_accepts_numpy_integers(target_servings):
    """Test that integral serving counts from numpy or pandas are accepted."""
    [scaled] = scale_recipe(_recipe(4, [1.5]), target_servings)
    assert scaled.quantity == 3
    assert isinstance(scaled.quantity, int)


@pytest.mark.parametrize("target_servings", [0, -1, 2.5, "4", True, None])
def test_scale_rejects_invalid_servings(target_servings):
    """Test that only positive integer serving counts are accepted."""
    with pytest.raises(ValidationError):
        scale_recipe(_recipe(4, [1]), target_servings)


@pytest.mark.parametrize("base_servings", [0, -2])
def test_scale_rejects_invalid_base_servings(base_servings):
    """Test that recipes with non-positive base servings are rejected."""
    with pytest.raises(ValidationError):
        scale_recipe(_recipe(base_servings, [1]), 2)


def test_validation_error_is_value_error():
    """Test that ValidationError can be caught as a ValueError."""
    with pytest.raises(ValueError):
        scale_recipe(_recipe(4, [1]), 0)


@pytest.mark.parametrize(
    "quantity, expected",
    [
        (0.333333, 0.33),
        (0.125, 0.13),
        (0.999, 1.0),
        (1.0, 1),
        (12.0, 12),
        (1.25, 1.3),
        (2.04, 2.0),
        (0.004, 0.01),
    ],
)
def test_format_quantity(quantity, expected):
    """Test the three display rounding bands."""
    assert format_quantity(quantity) == expected


@pytest.mark.parametrize(
    "base_servings, expected_range",
    [(1, (1, 2)), (2, (1, 4)), (3, (2, 6)), (4, (2, 8)), (6, (3, 12))],
)
def test_serving_range(base_servings, expected_range):
    """Test the slider bounds offered for each base serving count."""
    assert serving_range(_recipe(base_servings, [1])) == expected_range
