"""Tabular views of recommendations and scaled ingredient lists."""

from typing import Sequence

import pandas as pd

from pantry_utils.recipes.models import Recommendation, ScaledIngredient

RECOMMENDATION_COLUMNS = [
    "recipe_id",
    "name",
    "cuisine",
    "score",
    "matched_count",
    "missing_count",
    "matched",
    "missing",
]
SCALED_INGREDIENT_COLUMNS = ["name", "quantity", "unit"]


def recommendations_to_dataframe(
    recommendations: Sequence[Recommendation],
) -> pd.DataFrame:
    """Flatten ranked recommendations into a DataFrame.

    Args:
        recommendations: Output of ``score_recipes``, already ranked.

    Returns:
        One row per recommendation in ranking order. ``matched`` and
        ``missing`` hold comma-separated ingredient names.
    """
    rows = [
        {
            "recipe_id": r.recipe.id,
            "name": r.recipe.name,
            "cuisine": r.recipe.cuisine,
            "score": r.score,
            "matched_count": len(r.matched_ingredients),
            "missing_count": len(r.missing_ingredients),
            "matched": ", ".join(r.matched_ingredients),
            "missing": ", ".join(r.missing_ingredients),
        }
        for r in recommendations
    ]
    return pd.DataFrame(rows, columns=RECOMMENDATION_COLUMNS)


def scaled_ingredients_to_dataframe(scaled: Sequence[ScaledIngredient]) -> pd.DataFrame:
    """One row per scaled ingredient, in recipe order."""
    rows = [
        {"name": i.name, "quantity": i.quantity, "unit": i.unit} for i in scaled
    ]
    return pd.DataFrame(rows, columns=SCALED_INGREDIENT_COLUMNS)
