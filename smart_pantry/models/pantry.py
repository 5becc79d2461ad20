"""Pantry item model for tracking what is on the shelves."""

from datetime import date, datetime

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from smart_pantry.database import Base
from smart_pantry.models.mixins import TimestampMixin

# Upper bound of the quantity column (32-bit signed integer)
MAX_QUANTITY = 2_147_483_647
MAX_NAME_LENGTH = 255


def parse_expiration_date(value: date | str | None) -> date | None:
    """Convert an incoming expiration date to the stored calendar date.

    Accepts ``None``, the empty string (no date), ``YYYY-MM-DD`` and full
    ISO-8601 datetimes such as ``2026-01-17T00:00:00.000Z``; only the date
    part of a datetime is kept.

    Raises:
        ValueError: if a non-empty value cannot be read as a date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported expiration date type: {type(value).__name__}")

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


class PantryItem(Base, TimestampMixin):
    """A stocked item with a quantity and optional expiration date."""

    __tablename__ = "pantry_items"

    id = Column(String(26), primary_key=True)  # ULID, sorts by creation time
    name = Column(String(MAX_NAME_LENGTH), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    category_id = Column(String(26), ForeignKey("categories.id"), nullable=False, index=True)
    expiration_date = Column(Date, nullable=True, index=True)

    # Relationships
    category = relationship("Category", back_populates="items")
