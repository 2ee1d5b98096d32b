"""Persisted pydantic models."""

from inventory.models.category import Category
from inventory.models.item import Item
from inventory.models.list import ItemRef, List, ListRef
from inventory.models.store_data import StoreData

__all__ = [
    "Category",
    "Item",
    "ItemRef",
    "List",
    "ListRef",
    "StoreData",
]
