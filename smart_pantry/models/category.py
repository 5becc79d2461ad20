"""Category model."""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from smart_pantry.database import Base
from smart_pantry.models.mixins import TimestampMixin


def normalize_category_name(name: str) -> str:
    """Key used for case-insensitive category matching."""
    return name.strip().lower()


class Category(Base, TimestampMixin):
    """Category for grouping pantry items (e.g. "Dairy", "Grains")."""

    __tablename__ = "categories"

    id = Column(String(26), primary_key=True)
    name = Column(String(255), nullable=False)  # Display name
    normalized_name = Column(String(255), nullable=False, unique=True, index=True)

    # Relationships
    items = relationship("PantryItem", back_populates="category")
