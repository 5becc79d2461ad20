"""Pantry item API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError

from smart_pantry.api.dependencies import get_bulk_import_service, get_pantry_store
from smart_pantry.config import Settings, get_settings
from smart_pantry.models.pantry import PantryItem
from smart_pantry.schemas.bulk_import import BulkImportRequest, BulkImportResponse
from smart_pantry.schemas.pantry import PantryItemCreate, PantryItemResponse, PantryItemUpdate
from smart_pantry.services.bulk_import import BulkImportService
from smart_pantry.services.pantry_store import PantryStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/items", tags=["items"])


def get_pantry_item(store: PantryStore, item_id: str) -> PantryItem:
    """Get a pantry item or raise 404."""
    item = store.get_item(item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")
    return item


def require_category(store: PantryStore, category_id: str) -> None:
    """Reject references to categories that do not exist."""
    if store.get_category(category_id) is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Category not found")


@router.get("", response_model=list[PantryItemResponse])
def list_pantry_items(
    store: Annotated[PantryStore, Depends(get_pantry_store)],
    search: str | None = Query(default=None, description="Case-insensitive name filter"),
    category_id: str | None = Query(default=None, description="Only items in this category"),
):
    """List pantry items in the order they were added."""
    return store.list_items(search=search, category_id=category_id)


@router.get("/expiring", response_model=list[PantryItemResponse])
def list_expiring_items(
    store: Annotated[PantryStore, Depends(get_pantry_store)],
    settings: Annotated[Settings, Depends(get_settings)],
    days: int | None = Query(default=None, ge=0, description="Window in days from today"),
):
    """List items expiring within the window, soonest first.

    Already expired items are included.
    """
    within_days = settings.expiring_window_days if days is None else days
    return store.list_expiring_items(within_days)


@router.post("/bulk", response_model=BulkImportResponse)
def bulk_import_items(
    request: BulkImportRequest,
    service: Annotated[BulkImportService, Depends(get_bulk_import_service)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Import many items in one request.

    Per-record problems (missing fields, bad quantity, unknown category) are
    reported in ``errors``; only a storage failure fails the request.
    """
    if len(request.items) > settings.bulk_import_max_items:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many items. Maximum per import is {settings.bulk_import_max_items}.",
        )

    try:
        outcome = service.import_items(request.items)
    except SQLAlchemyError:
        logger.exception(f"Bulk import of {len(request.items)} records failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to bulk import items",
        ) from None

    return BulkImportResponse.from_outcome(outcome)


@router.post("", response_model=PantryItemResponse, status_code=status.HTTP_201_CREATED)
def create_pantry_item(
    item_data: PantryItemCreate,
    store: Annotated[PantryStore, Depends(get_pantry_store)],
):
    """Add an item to the pantry."""
    require_category(store, item_data.category_id)
    return store.create_item(
        name=item_data.name,
        quantity=item_data.quantity,
        category_id=item_data.category_id,
        expiration_date=item_data.expiration_date,
    )


@router.get("/{item_id}", response_model=PantryItemResponse)
def get_item(
    item_id: str,
    store: Annotated[PantryStore, Depends(get_pantry_store)],
):
    """Get a specific pantry item."""
    return get_pantry_item(store, item_id)


@router.put("/{item_id}", response_model=PantryItemResponse)
def update_pantry_item(
    item_id: str,
    item_data: PantryItemUpdate,
    store: Annotated[PantryStore, Depends(get_pantry_store)],
):
    """Update a pantry item. Only the fields sent are changed."""
    item = get_pantry_item(store, item_id)

    changes = {}
    if item_data.name is not None:
        changes["name"] = item_data.name
    if item_data.quantity is not None:
        changes["quantity"] = item_data.quantity
    if item_data.category_id is not None:
        require_category(store, item_data.category_id)
        changes["category_id"] = item_data.category_id
    if "expiration_date" in item_data.model_fields_set:
        changes["expiration_date"] = item_data.expiration_date

    return store.update_item(item, changes)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_item(
    item_id: str,
    store: Annotated[PantryStore, Depends(get_pantry_store)],
):
    """Remove an item from the pantry."""
    item = get_pantry_item(store, item_id)
    store.delete_item(item)
