"""Item schemas."""

from pydantic import Field

from inventory.models.mixins import CamelModel


class ItemCreate(CamelModel):
    """Create a new item."""

    name: str | None = Field(None, max_length=500)
    category_ids: list[int] | None = None


class ItemUpdate(CamelModel):
    """Update an item."""

    name: str | None = Field(None, max_length=500)
    category_ids: list[int] | None = None
