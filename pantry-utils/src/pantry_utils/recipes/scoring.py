"""Recipe matching and ranking against a pantry."""

import logging
from typing import AbstractSet, Iterable, List, Sequence

from pantry_utils.ingredients.models import PantryItem
from pantry_utils.ingredients.normalization import normalize_item_name
from pantry_utils.recipes.models import Recipe, Recommendation

logger = logging.getLogger(__name__)


def score_recipes(
    catalog: Sequence[Recipe], pantry: Iterable[PantryItem]
) -> List[Recommendation]:
    """Score every catalog recipe against the pantry and rank them.

    Matching is exact on normalized names; there is no fuzzy, substring or
    plural matching. Recipes that match nothing are still returned with a
    score of 0, so callers decide what to show.

    Args:
        catalog: Recipes in catalog order.
        pantry: Current pantry snapshot.

    Returns:
        One Recommendation per recipe, sorted by descending score. Ties keep
        catalog order.
    """
    pantry_keys = _pantry_keys(pantry)
    recommendations = [_score_against(recipe, pantry_keys) for recipe in catalog]
    # sorted() is stable, so equal scores stay in catalog order
    ranked = sorted(recommendations, key=lambda r: r.score, reverse=True)
    logger.debug(
        f"Scored {len(ranked)} recipe(s) against {len(pantry_keys)} pantry item(s)"
    )
    return ranked


def score_recipe(recipe: Recipe, pantry: Iterable[PantryItem]) -> Recommendation:
    """Split one recipe's ingredients into matched and missing and score it."""
    return _score_against(recipe, _pantry_keys(pantry))


def _score_against(recipe: Recipe, pantry_keys: AbstractSet[str]) -> Recommendation:
    matched = []
    missing = []
    for name in recipe.ingredient_names:
        if normalize_item_name(name) in pantry_keys:
            matched.append(name)
        else:
            missing.append(name)

    total = len(matched) + len(missing)
    score = len(matched) / total if total else 0.0
    return Recommendation(
        recipe=recipe,
        matched_ingredients=tuple(matched),
        missing_ingredients=tuple(missing),
        score=min(max(score, 0.0), 1.0),
    )


def _pantry_keys(pantry: Iterable[PantryItem]) -> AbstractSet[str]:
    keys = {normalize_item_name(item.name) for item in pantry}
    keys.discard("")
    return frozenset(keys)
