"""Pantry merging and editing utilities.

All functions take pantry snapshots and return new lists; the caller owns
the live pantry and must apply one change at a time.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from pantry_utils.errors import ValidationError
from pantry_utils.ingredients.models import PantryItem
from pantry_utils.ingredients.normalization import normalize_item_name

logger = logging.getLogger(__name__)


def merge_pantry_items(lists: Iterable[Sequence[PantryItem]]) -> List[PantryItem]:
    """Combine several item lists into one deduplicated pantry.

    Items are keyed by their normalized name. When a name repeats, the later
    item's quantity replaces the earlier one (including replacing it with
    None), while the item keeps the position of its first occurrence.
    Items whose name normalizes to an empty string are dropped.

    Args:
        lists: Item lists in the order they should be applied, e.g.
            ``[current_pantry, newly_parsed_items]``.

    Returns:
        The merged pantry. Merging an already merged pantry returns an equal
        list.

    Examples:
        >>> merge_pantry_items([[PantryItem("Egg", 2)], [PantryItem("egg", 5)]])
        [PantryItem(name='egg', quantity=5)]
    """
    merged: Dict[str, Optional[float]] = {}
    dropped = 0
    for items in lists:
        for item in items:
            name = normalize_item_name(item.name)
            if not name:
                dropped += 1
                continue
            # dict keeps first-insertion order on reassignment
            merged[name] = item.quantity

    if dropped:
        logger.debug(f"Dropped {dropped} pantry item(s) with empty names")
    return [PantryItem(name=name, quantity=quantity) for name, quantity in merged.items()]


def remove_pantry_item(pantry: Sequence[PantryItem], name: str) -> List[PantryItem]:
    """Return the pantry without the item whose normalized name matches ``name``."""
    key = normalize_item_name(name)
    return [item for item in pantry if normalize_item_name(item.name) != key]


def update_pantry_quantity(
    pantry: Sequence[PantryItem], name: str, quantity: Optional[float]
) -> List[PantryItem]:
    """Return the pantry with the quantity of ``name`` set to ``quantity``.

    Passing None clears the quantity. Unknown names leave the pantry as is.

    Raises:
        ValidationError: If ``quantity`` is zero or negative.
    """
    if quantity is not None and not quantity > 0:
        raise ValidationError(f"Quantity for {name!r} must be positive, got {quantity}")

    key = normalize_item_name(name)
    return [
        PantryItem(name=item.name, quantity=quantity)
        if normalize_item_name(item.name) == key
        else item
        for item in pantry
    ]
