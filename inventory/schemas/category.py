"""Category schemas."""

from pydantic import Field

from inventory.models.mixins import CamelModel


class CategoryCreate(CamelModel):
    """Create a new category."""

    name: str | None = Field(None, max_length=255)


class CategoryUpdate(CamelModel):
    """Update a category."""

    name: str | None = Field(None, max_length=255)
