"""Category schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from smart_pantry.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    """Create a new category."""

    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class CategoryResponse(CamelModel):
    """Category response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
