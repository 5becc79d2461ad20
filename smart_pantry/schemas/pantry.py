"""Pantry item schemas."""

from datetime import date, datetime

from pydantic import ConfigDict, Field, field_validator

from smart_pantry.models.pantry import MAX_NAME_LENGTH, MAX_QUANTITY, parse_expiration_date
from smart_pantry.schemas.base import CamelModel
from smart_pantry.schemas.category import CategoryResponse


class PantryItemCreate(CamelModel):
    """Create a pantry item."""

    name: str = Field(..., min_length=1, max_length=MAX_NAME_LENGTH)
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY)
    category_id: str = Field(..., min_length=1, max_length=26)
    expiration_date: date | None = None

    @field_validator("expiration_date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return parse_expiration_date(value)


class PantryItemUpdate(CamelModel):
    """Update a pantry item.

    Omitted fields are left alone. ``expirationDate`` may be sent as
    ``null`` or ``""`` to clear the date.
    """

    name: str | None = Field(None, min_length=1, max_length=MAX_NAME_LENGTH)
    quantity: int | None = Field(None, ge=0, le=MAX_QUANTITY)
    category_id: str | None = Field(None, min_length=1, max_length=26)
    expiration_date: date | None = None

    @field_validator("expiration_date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return parse_expiration_date(value)


class PantryItemResponse(CamelModel):
    """Pantry item response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    quantity: int
    category_id: str
    expiration_date: date | None
    category: CategoryResponse | None = None
    created_at: datetime
    updated_at: datetime
