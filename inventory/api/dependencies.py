"""FastAPI dependencies for store access and collection queries."""

import re
from collections.abc import Sequence
from typing import Annotated, TypeVar

from fastapi import HTTPException, Query, status
from pydantic import BaseModel

from inventory.config import get_settings
from inventory.services.store import Store

Entity = TypeVar("Entity")

_store: Store | None = None


def get_store() -> Store:
    """Get the process-wide store, opening its backing file on first use."""
    global _store
    if _store is None:
        _store = Store(get_settings().db_path)
    return _store


class ListQuery(BaseModel):
    """Query parameters shared by the collection endpoints."""

    limit: int
    skip: int
    name: str | None


def get_list_query(
    limit: Annotated[int, Query(ge=1, le=1000, description="Page size")] = 100,
    skip: Annotated[int, Query(ge=0, description="Entries to skip")] = 0,
    name: Annotated[
        str | None, Query(min_length=1, description="Case-insensitive name pattern")
    ] = None,
) -> ListQuery:
    """Parse limit, skip and name query parameters."""
    return ListQuery(limit=limit, skip=skip, name=name)


def apply_list_query(entities: Sequence[Entity], query: ListQuery) -> list[Entity]:
    """Filter entities by name pattern, then paginate.

    The name pattern is a regular expression searched anywhere in the name,
    ignoring case.
    """
    selected = list(entities)
    if query.name is not None:
        try:
            pattern = re.compile(query.name, re.IGNORECASE)
        except re.error as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"name is not a valid pattern: {e}",
            ) from e
        selected = [entity for entity in selected if pattern.search(entity.name)]
    return selected[query.skip : query.skip + query.limit]
