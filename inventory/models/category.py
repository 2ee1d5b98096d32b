"""Category model."""

from inventory.models.mixins import TimestampMixin


class Category(TimestampMixin):
    """Named tag attachable to items."""

    id: int
    name: str
