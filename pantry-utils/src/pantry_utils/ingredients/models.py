import dataclasses
from typing import Optional


@dataclasses.dataclass(frozen=True)
class PantryItem:
    """One entry of the pantry, keyed by its normalized name.

    ``quantity`` is advisory: it is shown to the user and carried through
    merges but never consulted when matching recipes.
    """

    name: str
    quantity: Optional[float] = None
