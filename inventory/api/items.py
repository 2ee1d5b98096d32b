"""Item API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from inventory.api.dependencies import ListQuery, apply_list_query, get_list_query, get_store
from inventory.models.item import Item
from inventory.schemas.item import ItemCreate, ItemUpdate
from inventory.services.store import Store

router = APIRouter(prefix="/api/v1/item", tags=["items"])


def get_item_or_404(store: Store, item_id: int) -> Item:
    """Get an item or raise 404."""
    item = store.get_item(item_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"item with id {item_id} not found"
        )
    return item


@router.get("", response_model=list[Item])
async def get_items(
    store: Annotated[Store, Depends(get_store)],
    query: Annotated[ListQuery, Depends(get_list_query)],
):
    """Get items, optionally filtered by name."""
    return apply_list_query(store.list_items(), query)


@router.get("/{item_id}", response_model=Item)
async def get_item(item_id: int, store: Annotated[Store, Depends(get_store)]):
    """Get a single item."""
    return get_item_or_404(store, item_id)


@router.post("", response_model=Item, status_code=status.HTTP_201_CREATED)
async def create_item(item_data: ItemCreate, store: Annotated[Store, Depends(get_store)]):
    """Create a new item. Every category id must exist."""
    return store.post_item(item_data)


@router.patch("/{item_id}", response_model=Item)
async def update_item(
    item_id: int,
    item_data: ItemUpdate,
    store: Annotated[Store, Depends(get_store)],
):
    """Update an item."""
    existing = get_item_or_404(store, item_id)
    item = store.patch_item(item_id, item_data)
    if item is existing:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: int, store: Annotated[Store, Depends(get_store)]):
    """Delete an item. Lists keep their references to it."""
    if not store.delete_item(item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"item with id {item_id} not found"
        )
