"""Pantry item parsing, normalization and merging utilities."""

from .merging import merge_pantry_items, remove_pantry_item, update_pantry_quantity
from .models import PantryItem
from .normalization import normalize_item_name, to_title_case
from .parsing import parse_manual_entry

__all__ = [
    "PantryItem",
    "normalize_item_name",
    "to_title_case",
    "parse_manual_entry",
    "merge_pantry_items",
    "remove_pantry_item",
    "update_pantry_quantity",
]
