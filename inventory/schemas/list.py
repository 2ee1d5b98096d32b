"""List schemas."""

from pydantic import AwareDatetime, Field

from inventory.models.mixins import CamelModel


class ItemRefIn(CamelModel):
    """Reference to an item, as sent by clients."""

    item_id: int
    count: int
    created_at: AwareDatetime | None = None
    modified_at: AwareDatetime | None = None


class ListRefIn(CamelModel):
    """Reference to another list, as sent by clients."""

    list_id: int
    count: int
    created_at: AwareDatetime | None = None
    modified_at: AwareDatetime | None = None


class ListCreate(CamelModel):
    """Create a new list."""

    name: str | None = Field(None, max_length=255)
    item_refs: list[ItemRefIn] | None = None
    list_refs: list[ListRefIn] | None = None


class ListUpdate(CamelModel):
    """Update a list."""

    name: str | None = Field(None, max_length=255)
    item_refs: list[ItemRefIn] | None = None
    list_refs: list[ListRefIn] | None = None
