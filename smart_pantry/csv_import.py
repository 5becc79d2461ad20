"""Read pantry spreadsheets into raw bulk import records."""

import csv
import io
from typing import Any

# CSV header (lower-cased) -> bulk import record key
COLUMN_MAP = {
    "name": "name",
    "quantity": "quantity",
    "category": "categoryName",
    "expirationdate": "expirationDate",
}


def parse_csv(text: str) -> list[dict[str, Any]]:
    """Parse CSV text with a header row into bulk import records.

    Headers are matched case-insensitively; unknown columns are ignored and
    blank lines skipped. Values are trimmed but not validated, which is left
    to the import itself.
    """
    reader = csv.reader(io.StringIO(text.lstrip("﻿")))
    header = next(reader, None)
    if header is None:
        return []

    columns = [COLUMN_MAP.get(h.strip().lower()) for h in header]
    records = []
    for row in reader:
        if not any(value.strip() for value in row):
            continue
        record = {}
        for key, value in zip(columns, row):
            if key is not None:
                record[key] = value.strip()
        records.append(record)
    return records
