"""Item name normalization utilities."""


def normalize_item_name(raw: str) -> str:
    """Canonicalize an item or ingredient name into its matching key.

    Trims surrounding whitespace, collapses internal runs of whitespace to a
    single space and lowercases. There is no stemming or synonym lookup, so
    "tomato" and "tomatoes" stay distinct keys.

    Args:
        raw: Item name as typed, detected or listed in a recipe.

    Returns:
        The normalized name. Empty or whitespace-only input gives an empty
        string, which callers treat as "no item".

    Examples:
        >>> normalize_item_name("  Bell   Pepper ")
        'bell pepper'
        >>> normalize_item_name("   ")
        ''
    """
    return " ".join(raw.split()).lower()


def to_title_case(name: str) -> str:
    """Capitalize the first letter of every space-separated word for display.

    Examples:
        >>> to_title_case("cups spinach")
        'Cups Spinach'
    """
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))
