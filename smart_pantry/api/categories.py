"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from smart_pantry.api.dependencies import get_pantry_store
from smart_pantry.schemas.category import CategoryCreate, CategoryResponse
from smart_pantry.services.pantry_store import PantryStore

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    store: Annotated[PantryStore, Depends(get_pantry_store)],
):
    """List all categories ordered by name."""
    return store.list_categories()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    response: Response,
    store: Annotated[PantryStore, Depends(get_pantry_store)],
):
    """Create a category, or return the existing one with the same name.

    Names match case-insensitively, so "dairy" returns an existing "Dairy"
    with 200 instead of 201.
    """
    category, created = store.get_or_create_category(category_data.name)
    if not created:
        response.status_code = status.HTTP_200_OK
    return category
