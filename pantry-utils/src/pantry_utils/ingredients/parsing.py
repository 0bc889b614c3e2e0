"""Manual pantry entry parsing utilities."""

import dataclasses
import logging
import re
from typing import List, Optional, Tuple

from pantry_utils.ingredients.models import PantryItem
from pantry_utils.ingredients.normalization import normalize_item_name
from pantry_utils.ingredients.number_utils import parse_number

logger = logging.getLogger(__name__)

# --- Constants ---

# Entries are separated by commas or line breaks
SEGMENT_SEPARATORS = re.compile(r"[,\n]")

# A number token is a simple fraction or a decimal; anything else is a word.
# Digits glued to letters ("2cups") come out as two adjacent tokens.
TOKEN_PATTERN = re.compile(r"(?P<number>\d+/\d+|\d+(?:\.\d+)?)|(?P<word>[^\s\d]+)")

NUMBER = "number"
WORD = "word"


@dataclasses.dataclass(frozen=True)
class Token:
    kind: str
    text: str
    start: int
    spaced: bool  # preceded by whitespace (or start of segment)


# --- Functions ---


def parse_manual_entry(text: str) -> List[PantryItem]:
    """Parse a block of free text into pantry items.

    The text is split on commas and newlines and every non-empty segment
    becomes one item. A segment shaped like ``<number> [unit] <name>`` yields
    a quantity; the unit is not stored separately but kept as part of the
    name. Anything else becomes a name-only item.

    Args:
        text: Free text typed by the user (e.g. "2 cups spinach, 1 lime").

    Returns:
        One PantryItem per non-empty segment, in input order. Items are not
        deduplicated here; see ``merge_pantry_items``.

    Examples:
        >>> parse_manual_entry("2 cups spinach, avocado")
        [PantryItem(name='cups spinach', quantity=2.0), PantryItem(name='avocado', quantity=None)]
    """
    items = []
    for segment in split_segments(text):
        quantity, name = parse_segment(segment)
        items.append(PantryItem(name=normalize_item_name(name), quantity=quantity))
    return items


def split_segments(text: str) -> List[str]:
    """Split entry text on commas and newlines, dropping empty segments."""
    segments = (segment.strip() for segment in SEGMENT_SEPARATORS.split(text))
    return [segment for segment in segments if segment]


def tokenize(segment: str) -> List[Token]:
    """Split a segment into number and word tokens.

    Each token remembers where it starts and whether whitespace precedes it,
    so the grammar can tell "2 cups" from "2cups" and slice the original
    segment for the name.
    """
    tokens = []
    previous_end = 0
    for match in TOKEN_PATTERN.finditer(segment):
        spaced = match.start() == 0 or match.start() > previous_end
        tokens.append(Token(match.lastgroup, match.group(), match.start(), spaced))
        previous_end = match.end()
    return tokens


def parse_segment(segment: str) -> Tuple[Optional[float], str]:
    """Parse one trimmed segment into ``(quantity, name)``.

    Grammar: ``<number> <unit>? <name>`` where the unit is a single
    alphabetic token (optionally glued to the number) and the name is the
    remainder of the segment after whitespace. When the segment does not
    fit, the whole segment is the name and the quantity is None.
    """
    tokens = tokenize(segment)
    amount, name_start = _parse_amount_and_unit(tokens)
    if amount is None:
        return None, segment

    name = segment[name_start:]
    if amount <= 0:
        logger.debug(f"Ignoring non-positive quantity in {segment!r}")
        return None, name
    return amount, name


def _parse_amount_and_unit(tokens: List[Token]) -> Tuple[Optional[float], int]:
    """Match the leading number and optional unit.

    Returns:
        A tuple containing:
            - amount: Parsed number, or None when the grammar does not match
            - name_start: Offset in the segment where the display name begins
              (the unit, when present, is part of the name)
    """
    if len(tokens) < 2 or tokens[0].kind != NUMBER:
        return None, 0

    try:
        amount = parse_number(tokens[0].text)
    except (ValueError, ZeroDivisionError):
        return None, 0

    unit = tokens[1]
    if (
        len(tokens) >= 3
        and unit.kind == WORD
        and unit.text.isalpha()
        and tokens[2].spaced
    ):
        return amount, unit.start

    # No unit: the name must be separated from the number by whitespace
    if unit.spaced:
        return amount, unit.start

    return None, 0
