"""Category API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from inventory.api.dependencies import ListQuery, apply_list_query, get_list_query, get_store
from inventory.models.category import Category
from inventory.schemas.category import CategoryCreate, CategoryUpdate
from inventory.services.store import Store

router = APIRouter(prefix="/api/v1/category", tags=["categories"])


def get_category_or_404(store: Store, category_id: int) -> Category:
    """Get a category or raise 404."""
    category = store.get_category(category_id)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"category with id {category_id} not found",
        )
    return category


@router.get("", response_model=list[Category])
async def get_categories(
    store: Annotated[Store, Depends(get_store)],
    query: Annotated[ListQuery, Depends(get_list_query)],
):
    """Get categories, optionally filtered by name."""
    return apply_list_query(store.list_categories(), query)


@router.get("/{category_id}", response_model=Category)
async def get_category(category_id: int, store: Annotated[Store, Depends(get_store)]):
    """Get a single category."""
    return get_category_or_404(store, category_id)


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate, store: Annotated[Store, Depends(get_store)]
):
    """Create a new category."""
    return store.post_category(category_data)


@router.patch("/{category_id}", response_model=Category)
async def update_category(
    category_id: int,
    category_data: CategoryUpdate,
    store: Annotated[Store, Depends(get_store)],
):
    """Update a category. Answers 304 when nothing was supplied."""
    existing = get_category_or_404(store, category_id)
    category = store.patch_category(category_id, category_data)
    if category is existing:
        return Response(status_code=status.HTTP_304_NOT_MODIFIED)
    return category


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int, store: Annotated[Store, Depends(get_store)]):
    """Delete a category. Items keep their reference to it."""
    if not store.delete_category(category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"category with id {category_id} not found",
        )
