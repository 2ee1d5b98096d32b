"""Item model."""

from pydantic import Field

from inventory.models.mixins import TimestampMixin


class Item(TimestampMixin):
    """Named inventory unit, optionally tagged with categories."""

    id: int
    name: str
    category_ids: list[int] = Field(default_factory=list)
