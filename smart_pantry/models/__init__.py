"""SQLAlchemy models."""

from smart_pantry.models.category import Category
from smart_pantry.models.pantry import PantryItem

__all__ = [
    "Category",
    "PantryItem",
]
