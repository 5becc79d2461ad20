"""Bulk import of pantry items from externally supplied records.

A batch goes through four stages, each fully consuming the previous one:

1. validation: field presence and quantity/date coercion, no I/O
2. category resolution: one case-insensitive lookup for every referenced name
3. materialization: fresh ids plus a single bulk insert
4. aggregation: counts and itemized rejections

Per-record problems never abort the batch; they are reported in
``ImportOutcome.errors``. Store faults propagate to the caller and fail the
whole import. Categories are never created here: an unknown name is a
rejection, so a sloppy spreadsheet cannot fill the pantry with near-duplicate
categories.
"""

import logging
import math
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Protocol

from smart_pantry.ids import new_id
from smart_pantry.models.category import normalize_category_name
from smart_pantry.models.pantry import MAX_NAME_LENGTH, MAX_QUANTITY, parse_expiration_date

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "quantity", "categoryName")

MISSING_FIELDS_REASON = "Missing required fields (name, quantity, or categoryName)"
INVALID_QUANTITY_REASON = "Invalid quantity"
INVALID_EXPIRATION_DATE_REASON = "Invalid expiration date"
NON_TEXT_FIELDS_REASON = "Invalid name or categoryName (must be text)"
NAME_TOO_LONG_REASON = f"Name or categoryName longer than {MAX_NAME_LENGTH} characters"
NAME_INVALID_CHARACTERS_REASON = "Name or categoryName contains invalid characters"

# Leading integer of a quantity string: "12", " 3 cans", "10.5" -> 10
_LEADING_INT = re.compile(r"^\s*([+-]?)0*([0-9]+)")
_MAX_QUANTITY_DIGITS = len(str(MAX_QUANTITY))


class RejectionKind(str, Enum):
    """Why a record was not imported."""

    MISSING_FIELD = "missing_field"
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_NAME = "invalid_name"
    INVALID_EXPIRATION_DATE = "invalid_expiration_date"
    UNKNOWN_CATEGORY = "unknown_category"


@dataclass
class Rejection:
    """A source record together with the reason it was rejected."""

    record: Any
    kind: RejectionKind
    reason: str


@dataclass
class ValidatedCandidate:
    """A record that passed structural validation but is not yet resolved."""

    name: str
    quantity: int
    category_name: str
    expiration_date: date | None
    record: Any = field(repr=False)


@dataclass
class ResolvedItem:
    """An insertable pantry item with a fresh id and a known category."""

    id: str
    name: str
    quantity: int
    category_id: str
    expiration_date: date | None


@dataclass
class ImportOutcome:
    """Aggregated result of one bulk import call."""

    errors: list[Rejection] = field(default_factory=list)
    imported_items: list[ResolvedItem] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.imported_items)

    @property
    def failed_count(self) -> int:
        return len(self.errors)


class NamedCategory(Protocol):
    id: str
    name: str


class ImportStore(Protocol):
    """Persistence operations the import pipeline depends on."""

    def find_categories_by_names(self, names: Iterable[str]) -> Sequence[NamedCategory]: ...

    def bulk_insert_items(self, items: Sequence[ResolvedItem]) -> None: ...


def coerce_quantity(value: Any) -> int | None:
    """Read an integer quantity from a number or a numeric string.

    Strings use their leading integer ("3 cans" is 3, "10.5" is 10) and floats
    are truncated. Returns None when no integer can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if not match:
            return None
        sign, digits = match.groups()
        if len(digits) > _MAX_QUANTITY_DIGITS:
            # Out of column range; also keeps int() under the str-to-int digit limit
            return None
        return int(sign + digits)
    return None


def _text(value: Any) -> str | None:
    """Trimmed text of a name field; numbers are read as their string form."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            value = str(value)
        except ValueError:
            # Integer past the interpreter's int-to-str digit limit
            return None
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _name_problem(*values: str) -> str | None:
    for value in values:
        if len(value) > MAX_NAME_LENGTH:
            return NAME_TOO_LONG_REASON
        if "\x00" in value:
            return NAME_INVALID_CHARACTERS_REASON
    return None


def validate_records(records: Sequence[Any]) -> tuple[list[ValidatedCandidate], list[Rejection]]:
    """Split raw records into candidates and rejections, keeping input order."""
    candidates: list[ValidatedCandidate] = []
    rejections: list[Rejection] = []

    for record in records:
        if not isinstance(record, dict) or any(not record.get(f) for f in REQUIRED_FIELDS):
            rejections.append(Rejection(record, RejectionKind.MISSING_FIELD, MISSING_FIELDS_REASON))
            continue

        name = _text(record["name"])
        category_name = _text(record["categoryName"])
        if name is None or category_name is None:
            if isinstance(record["name"], str) and isinstance(record["categoryName"], str):
                rejections.append(
                    Rejection(record, RejectionKind.MISSING_FIELD, MISSING_FIELDS_REASON)
                )
            else:
                rejections.append(
                    Rejection(record, RejectionKind.INVALID_NAME, NON_TEXT_FIELDS_REASON)
                )
            continue

        problem = _name_problem(name, category_name)
        if problem:
            rejections.append(Rejection(record, RejectionKind.INVALID_NAME, problem))
            continue

        quantity = coerce_quantity(record["quantity"])
        if quantity is None or not 0 <= quantity <= MAX_QUANTITY:
            rejections.append(
                Rejection(record, RejectionKind.INVALID_QUANTITY, INVALID_QUANTITY_REASON)
            )
            continue

        try:
            expiration_date = parse_expiration_date(record.get("expirationDate"))
        except ValueError:
            rejections.append(
                Rejection(
                    record,
                    RejectionKind.INVALID_EXPIRATION_DATE,
                    INVALID_EXPIRATION_DATE_REASON,
                )
            )
            continue

        candidates.append(
            ValidatedCandidate(
                name=name,
                quantity=quantity,
                category_name=category_name,
                expiration_date=expiration_date,
                record=record,
            )
        )

    return candidates, rejections


def resolve_categories(
    candidates: Sequence[ValidatedCandidate],
    store: ImportStore,
) -> tuple[list[tuple[ValidatedCandidate, str]], list[Rejection]]:
    """Attach existing category ids to candidates with a single store lookup.

    Names are deduplicated as given (case-sensitive); the store matches each
    case-insensitively. Unknown names are rejected, never created.
    """
    if not candidates:
        return [], []

    names = {candidate.category_name for candidate in candidates}
    categories = store.find_categories_by_names(names)
    category_ids = {normalize_category_name(category.name): category.id for category in categories}

    resolved: list[tuple[ValidatedCandidate, str]] = []
    rejections: list[Rejection] = []
    for candidate in candidates:
        category_id = category_ids.get(normalize_category_name(candidate.category_name))
        if category_id is None:
            rejections.append(
                Rejection(
                    candidate.record,
                    RejectionKind.UNKNOWN_CATEGORY,
                    f"Category '{candidate.category_name}' not found",
                )
            )
        else:
            resolved.append((candidate, category_id))

    return resolved, rejections


def materialize_items(
    resolved: Sequence[tuple[ValidatedCandidate, str]],
    store: ImportStore,
    id_factory: Callable[[], str] = new_id,
) -> list[ResolvedItem]:
    """Assign ids and persist every resolved candidate in one bulk insert."""
    items = [
        ResolvedItem(
            id=id_factory(),
            name=candidate.name,
            quantity=candidate.quantity,
            category_id=category_id,
            expiration_date=candidate.expiration_date,
        )
        for candidate, category_id in resolved
    ]
    if items:
        store.bulk_insert_items(items)
    return items


def aggregate(
    validation_rejections: Sequence[Rejection],
    resolution_rejections: Sequence[Rejection],
    items: Sequence[ResolvedItem],
) -> ImportOutcome:
    """Build the outcome report.

    Rejections are grouped by stage (validation first, then resolution), not
    interleaved by their position in the original batch.
    """
    return ImportOutcome(
        errors=[*validation_rejections, *resolution_rejections],
        imported_items=list(items),
    )


class BulkImportService:
    """Service for importing batches of pantry items."""

    def __init__(self, store: ImportStore, id_factory: Callable[[], str] = new_id):
        self.store = store
        self.id_factory = id_factory

    def import_items(self, records: Sequence[Any]) -> ImportOutcome:
        """Validate, resolve, and insert a batch of raw records."""
        candidates, invalid = validate_records(records)
        resolved, unresolved = resolve_categories(candidates, self.store)
        items = materialize_items(resolved, self.store, self.id_factory)
        outcome = aggregate(invalid, unresolved, items)

        for rejection in outcome.errors:
            logger.debug(f"Rejected import record ({rejection.kind.value}): {rejection.reason}")
        logger.info(
            f"Bulk import of {len(records)} records: "
            f"{outcome.success_count} imported, {outcome.failed_count} rejected"
        )
        return outcome
