"""List API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from inventory.api.dependencies import ListQuery, apply_list_query, get_list_query, get_store
from inventory.models.list import List
from inventory.schemas.list import ListCreate, ListUpdate
from inventory.services.store import Store

router = APIRouter(prefix="/api/v1/list", tags=["lists"])


def get_list_or_404(store: Store, list_id: int) -> List:
    """Get a list or raise 404."""
    list_obj = store.get_list(list_id)
    if list_obj is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"list with id {list_id} not found"
        )
    return list_obj


@router.get("", response_model=list[List])
async def get_lists(
    store: Annotated[Store, Depends(get_store)],
    query: Annotated[ListQuery, Depends(get_list_query)],
):
    """Get lists, optionally filtered by name."""
    return apply_list_query(store.list_lists(), query)


@router.get("/{list_id}", response_model=List)
async def get_list(list_id: int, store: Annotated[Store, Depends(get_store)]):
    """Get a single list with its item and list references."""
    return get_list_or_404(store, list_id)


@router.post("", response_model=List, status_code=status.HTTP_201_CREATED)
async def create_list(list_data: ListCreate, store: Annotated[Store, Depends(get_store)]):
    """Create a new list. Referenced items and lists must exist."""
    return store.post_list(list_data)


@router.patch("/{list_id}", response_model=List)
async def update_list(
    list_id: int,
    list_data: ListUpdate,
    store: Annotated[Store, Depends(get_store)],
):
    """Update a list. A list may not reference itself."""
    existing = get_list_or_404(store, list_id)
    list_obj = store.patch_list(list_id, list_data)
    if list_obj is existing:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED)
    return list_obj


@router.delete("/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_list(list_id: int, store: Annotated[Store, Depends(get_store)]):
    """Delete a list. Lists referencing it keep their references."""
    if not store.delete_list(list_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"list with id {list_id} not found"
        )
