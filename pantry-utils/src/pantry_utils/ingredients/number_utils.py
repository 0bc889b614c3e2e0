import math
from decimal import ROUND_HALF_UP, Decimal


def _is_decimal(text: str) -> bool:
    """Check if a string is a plain decimal like '3' or '2.5' (no sign, no exponent)."""
    whole, point, fraction = text.partition(".")
    if not whole.isdigit():
        return False
    return not point or fraction.isdigit()


def _is_fraction(text: str) -> bool:
    """Check if a string represents a valid fraction (e.g., '1/2')."""
    if "/" not in text:
        return False
    parts = text.split("/")
    return len(parts) == 2 and all(part.isdigit() for part in parts)


def _parse_fraction(text: str) -> Decimal:
    """Parse a fraction string (e.g., '1/2') into a Decimal."""
    if "/" not in text:
        raise ValueError(f"Not a fraction: {text}")

    numerator_str, denominator_str = text.split("/")
    numerator = Decimal(numerator_str)
    denominator = Decimal(denominator_str)

    if denominator == 0:
        raise ZeroDivisionError("Division by zero in fraction")

    return numerator / denominator


def parse_number(text: str) -> float:
    """Parse a decimal or simple fraction token into a float.

    Raises:
        ValueError: If the token is neither a decimal nor a fraction.
        ZeroDivisionError: If the token is a fraction with a zero denominator.
    """
    if _is_fraction(text):
        return float(_parse_fraction(text))
    if _is_decimal(text):
        return float(text)
    raise ValueError(f"Not a number: {text}")


def round_half_up(value: float, places: int) -> float:
    """Round a float to ``places`` decimals, ties away from zero.

    Works on the exact binary value of ``value`` so results match what a
    ``toFixed``-style formatter prints: ``round_half_up(0.625, 2)`` is 0.63,
    where the builtin ``round`` gives 0.62.
    """
    # Floats this large carry no fractional part
    if not math.isfinite(value) or abs(value) >= 2**53:
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
