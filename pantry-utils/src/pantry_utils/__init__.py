"""Pantry Utils - Pantry normalization and recipe recommendation utilities."""

__version__ = "0.1.0"

from . import ingredients, recipes, vision
from .errors import ValidationError

__all__ = ["ingredients", "recipes", "vision", "ValidationError"]
