#!/usr/bin/env python3
"""Bulk import a pantry CSV through the running API.

Usage:
    python scripts/import_csv.py sample_pantry_items.csv --url http://localhost:8000
"""

import argparse
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from smart_pantry.client import PantryClient
from smart_pantry.csv_import import parse_csv


def main() -> int:
    parser = argparse.ArgumentParser(description="Import pantry items from a CSV file")
    parser.add_argument("path", help="CSV with Name,Quantity,Category,ExpirationDate columns")
    parser.add_argument("--url", default="http://localhost:8000", help="API base URL")
    args = parser.parse_args()

    with open(args.path, encoding="utf-8") as f:
        records = parse_csv(f.read())
    if not records:
        print("No items found in CSV")
        return 1

    client = PantryClient.connect(args.url)
    try:
        result = client.bulk_import(records)
    finally:
        client.close()

    print(f"Imported: {result['successCount']}")
    print(f"Failed:   {result['failedCount']}")
    for error in result["errors"]:
        item = error["item"]
        label = item.get("name") if isinstance(item, dict) else None
        print(f"  [{label or 'Unknown Item'}] {error['reason']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
