"""Bulk import schemas."""

from datetime import date
from typing import Any

from pydantic import ConfigDict

from smart_pantry.schemas.base import CamelModel
from smart_pantry.services.bulk_import import ImportOutcome


class BulkImportRequest(CamelModel):
    """Raw records to import.

    Records are deliberately untyped; each is validated individually so a
    malformed row is reported instead of failing the whole request.
    """

    items: list[Any]


class ImportRejectionResponse(CamelModel):
    """A record that was not imported and why."""

    item: Any
    reason: str


class ImportedItemResponse(CamelModel):
    """An item created by the import."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    quantity: int
    category_id: str
    expiration_date: date | None


class BulkImportResponse(CamelModel):
    """Result of a bulk import."""

    success_count: int
    failed_count: int
    errors: list[ImportRejectionResponse]
    imported_items: list[ImportedItemResponse]

    @classmethod
    def from_outcome(cls, outcome: ImportOutcome) -> "BulkImportResponse":
        return cls(
            success_count=outcome.success_count,
            failed_count=outcome.failed_count,
            errors=[
                ImportRejectionResponse(item=rejection.record, reason=rejection.reason)
                for rejection in outcome.errors
            ],
            imported_items=[
                ImportedItemResponse.model_validate(item) for item in outcome.imported_items
            ],
        )
