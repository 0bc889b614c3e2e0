"""
Build a pantry from typed items and vision detections, then print the
recipes that best match it, with ingredients scaled to a serving count.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from pantry_utils.errors import ValidationError
from pantry_utils.ingredients import (
    PantryItem,
    merge_pantry_items,
    parse_manual_entry,
    to_title_case,
)
from pantry_utils.recipes import (
    Recommendation,
    load_catalog,
    recommendations_to_dataframe,
    scale_recipe,
    score_recipes,
)
from pantry_utils.vision import (
    CONFIDENCE_THRESHOLD,
    describe_detection_result,
    detections_from_predictions,
    process_detections,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend recipes for the ingredients in your pantry"
    )
    parser.add_argument(
        "--items",
        action="append",
        default=[],
        help='Pantry items as free text, e.g. "2 cups spinach, 1 lime" (repeatable)',
    )
    parser.add_argument(
        "--detections",
        type=str,
        help="JSON file with vision predictions ({class|label, score|confidence})",
    )
    parser.add_argument(
        "--catalog",
        type=str,
        default=None,
        help="Recipe catalog JSON file (defaults to the bundled catalog)",
    )
    parser.add_argument(
        "--min-confidence",
        type=float,
        default=CONFIDENCE_THRESHOLD,
        help="Minimum detection confidence to keep a prediction",
    )
    parser.add_argument(
        "--servings",
        type=int,
        default=None,
        help="Scale displayed recipes to this many servings (default: recipe base servings)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=5,
        help="Number of recipes to display",
    )
    parser.add_argument(
        "--include-unmatched",
        action="store_true",
        help="Also show recipes that match no pantry item",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function to build the pantry and print recommendations."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        catalog = load_catalog(args.catalog)
        pantry_sources: List[List[PantryItem]] = [
            parse_manual_entry(text) for text in args.items
        ]

        if args.detections:
            with open(args.detections, "r", encoding="utf-8") as f:
                predictions = json.load(f)
            result = process_detections(
                detections_from_predictions(predictions),
                min_confidence=args.min_confidence,
            )
            print(describe_detection_result(result))
            pantry_sources.append(list(result.items))

        pantry = merge_pantry_items(pantry_sources)
        recommendations = score_recipes(catalog, pantry)
        if not args.include_unmatched:
            recommendations = [r for r in recommendations if r.score > 0]
        recommendations = recommendations[: args.top]

        recipe_sections = [
            format_recipe(
                r,
                args.servings if args.servings is not None else r.recipe.base_servings,
            )
            for r in recommendations
        ]
    except ValidationError as e:
        logger.error(f"Invalid input: {e}")
        return 2

    print(format_pantry(pantry))
    if not recommendations:
        print("No matching recipes found.")
        return 0

    print("\nRecommended recipes:")
    print(recommendations_to_dataframe(recommendations).to_string(index=False))
    for section in recipe_sections:
        print()
        print(section)
    return 0


def format_pantry(pantry: Sequence[PantryItem]) -> str:
    lines = [f"Pantry ({len(pantry)} items):"]
    for item in pantry:
        quantity = f" x{item.quantity:g}" if item.quantity is not None else ""
        lines.append(f"  - {to_title_case(item.name)}{quantity}")
    return "\n".join(lines)


def format_recipe(recommendation: Recommendation, servings: int) -> str:
    """Render one recipe card: scaled ingredients, steps and match counts."""
    recipe = recommendation.recipe
    matched = set(recommendation.matched_ingredients)
    lines = [f"{recipe.name} ({recipe.cuisine}) - {servings} servings"]
    for ingredient in scale_recipe(recipe, servings):
        marker = "  [in pantry]" if ingredient.name in matched else ""
        lines.append(
            f"  - {to_title_case(ingredient.name)}: "
            f"{ingredient.quantity:g} {ingredient.unit}{marker}"
        )
    for number, step in enumerate(recipe.instructions, start=1):
        lines.append(f"  {number}. {step}")
    lines.append(
        f"  Pantry matches: {len(recommendation.matched_ingredients)}"
        f" | Missing items: {len(recommendation.missing_ingredients)}"
    )
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
