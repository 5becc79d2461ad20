"""Pydantic schemas for API requests and responses."""

from smart_pantry.schemas.bulk_import import (
    BulkImportRequest,
    BulkImportResponse,
    ImportedItemResponse,
    ImportRejectionResponse,
)
from smart_pantry.schemas.category import CategoryCreate, CategoryResponse
from smart_pantry.schemas.pantry import PantryItemCreate, PantryItemResponse, PantryItemUpdate

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "PantryItemCreate",
    "PantryItemUpdate",
    "PantryItemResponse",
    "BulkImportRequest",
    "BulkImportResponse",
    "ImportRejectionResponse",
    "ImportedItemResponse",
]
