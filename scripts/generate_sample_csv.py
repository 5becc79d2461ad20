#!/usr/bin/env python3
"""Write a sample CSV for trying out bulk import.

Usage:
    python scripts/generate_sample_csv.py [output_path] [rows]
"""

import csv
import random
import sys
from datetime import date, timedelta

FRUIT_NAMES = ["Apple", "Banana", "Orange", "Strawberry", "Grapes", "Mango", "Kiwi", "Plum"]
VEGETABLE_NAMES = ["Carrot", "Broccoli", "Spinach", "Tomato", "Potato", "Onion", "Garlic"]
ADJECTIVES = ["Fresh", "Organic", "Sweet", "Crunchy", "Ripe", "Large", "Small", "Seasonal"]


def generate_sample_csv(output_path: str = "sample_pantry_items.csv", rows: int = 100) -> None:
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["Name", "Quantity", "Category", "ExpirationDate"])
        for i in range(rows):
            is_fruit = random.random() > 0.5
            base_name = random.choice(FRUIT_NAMES if is_fruit else VEGETABLE_NAMES)
            expiration = date.today() + timedelta(days=random.randint(-10, 50))
            writer.writerow(
                [
                    f"{random.choice(ADJECTIVES)} {base_name} {i + 1}",
                    random.randint(1, 20),
                    "Fruits" if is_fruit else "Vegetables",
                    expiration.isoformat(),
                ]
            )
    print(f"Generated {rows} sample items in {output_path}")


if __name__ == "__main__":
    generate_sample_csv(
        sys.argv[1] if len(sys.argv) > 1 else "sample_pantry_items.csv",
        int(sys.argv[2]) if len(sys.argv) > 2 else 100,
    )
