"""Pydantic schemas for API requests."""

from inventory.schemas.category import CategoryCreate, CategoryUpdate
from inventory.schemas.item import ItemCreate, ItemUpdate
from inventory.schemas.list import ItemRefIn, ListCreate, ListRefIn, ListUpdate

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "ItemCreate",
    "ItemUpdate",
    "ItemRefIn",
    "ListRefIn",
    "ListCreate",
    "ListUpdate",
]
