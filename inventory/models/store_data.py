"""Aggregate persisted as a single file."""

from pydantic import Field, model_validator

from inventory.models.category import Category
from inventory.models.item import Item
from inventory.models.list import List
from inventory.models.mixins import CamelModel


class StoreData(CamelModel):
    """All collections and id counters of a store.

    Serialized as ``{categories, nextCategoryId, items, nextItemId, lists, nextListId}``.
    """

    categories: list[Category] = Field(default_factory=list)
    next_category_id: int = Field(default=0, ge=0)
    items: list[Item] = Field(default_factory=list)
    next_item_id: int = Field(default=0, ge=0)
    lists: list[List] = Field(default_factory=list)
    next_list_id: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_ids(self) -> "StoreData":
        """Ids must be unique per collection and below the collection's counter."""
        for kind, entities, next_id in (
            ("category", self.categories, self.next_category_id),
            ("item", self.items, self.next_item_id),
            ("list", self.lists, self.next_list_id),
        ):
            ids = [entity.id for entity in entities]
            if len(set(ids)) != len(ids):
                raise ValueError(f"duplicate {kind} ids")
            if ids and max(ids) >= next_id:
                raise ValueError(f"next {kind} id {next_id} is not above stored id {max(ids)}")
        return self
