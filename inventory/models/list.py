"""List model."""

from pydantic import Field

from inventory.models.mixins import TimestampMixin


class ItemRef(TimestampMixin):
    """Quantity of an item held by a list."""

    item_id: int
    count: int


class ListRef(TimestampMixin):
    """Quantity of another list nested in a list."""

    list_id: int
    count: int


class List(TimestampMixin):
    """Named aggregation of item and list references."""

    id: int
    name: str
    item_refs: list[ItemRef] = Field(default_factory=list)
    list_refs: list[ListRef] = Field(default_factory=list)
