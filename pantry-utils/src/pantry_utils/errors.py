"""Exceptions raised by pantry utilities."""


class ValidationError(ValueError):
    """Raised when a caller passes an out-of-domain value.

    Malformed text and empty collections never raise; this is reserved for
    numbers outside their domain (non-positive serving counts, base servings
    or quantities) and for invalid catalog records.
    """
