#!/usr/bin/env python3
"""Seed demo data for screenshots.

Writes a representative set of categories, items and lists into a store file.
An existing file is replaced.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or into another file:
    DB_PATH=/tmp/demo.json python scripts/seed_demo_data.py
"""

import os
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from inventory.config import get_settings
from inventory.services.store import Store

DB_PATH = get_settings().db_path

CATEGORIES = ["Produce", "Dairy", "Bakery", "Tools", "Camping"]

# name -> category names
ITEMS = {
    "Apples": ["Produce"],
    "Bananas": ["Produce"],
    "Milk": ["Dairy"],
    "Cheddar": ["Dairy"],
    "Sourdough": ["Bakery"],
    "Hammer": ["Tools"],
    "Screwdriver set": ["Tools"],
    "Tent": ["Camping"],
    "Headlamp": ["Camping", "Tools"],
}


def seed_demo_data():
    """Seed the demo store with representative data."""
    path = Path(DB_PATH)
    if path.exists():
        print(f"Removing existing store at {path}...")
        path.unlink()

    store = Store(path)

    print("Creating categories...")
    category_ids = {
        name: store.post_category({"name": name}).id for name in CATEGORIES
    }

    print("Creating items...")
    item_ids = {
        name: store.post_item(
            {"name": name, "category_ids": [category_ids[c] for c in categories]}
        ).id
        for name, categories in ITEMS.items()
    }

    print("Creating lists...")
    breakfast = store.post_list(
        {
            "name": "Breakfast",
            "item_refs": [
                {"item_id": item_ids["Bananas"], "count": 6},
                {"item_id": item_ids["Milk"], "count": 1},
                {"item_id": item_ids["Sourdough"], "count": 1},
            ],
        }
    )
    toolbox = store.post_list(
        {
            "name": "Toolbox",
            "item_refs": [
                {"item_id": item_ids["Hammer"], "count": 1},
                {"item_id": item_ids["Screwdriver set"], "count": 1},
            ],
        }
    )
    store.post_list(
        {
            "name": "Weekend trip",
            "item_refs": [
                {"item_id": item_ids["Tent"], "count": 1},
                {"item_id": item_ids["Headlamp"], "count": 2},
                {"item_id": item_ids["Apples"], "count": 4},
            ],
            "list_refs": [
                {"list_id": breakfast.id, "count": 2},
                {"list_id": toolbox.id, "count": 1},
            ],
        }
    )

    print(f"Done: {store.counts()} written to {path}")


if __name__ == "__main__":
    seed_demo_data()
