"""FastAPI dependencies for database-backed services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from smart_pantry.database import get_db
from smart_pantry.services.bulk_import import BulkImportService
from smart_pantry.services.pantry_store import PantryStore


def get_pantry_store(
    db: Annotated[Session, Depends(get_db)],
) -> PantryStore:
    """Get pantry store bound to the request's session."""
    return PantryStore(db)


def get_bulk_import_service(
    store: Annotated[PantryStore, Depends(get_pantry_store)],
) -> BulkImportService:
    """Get bulk import service with dependencies."""
    return BulkImportService(store)
