"""File-backed store for categories, items and lists."""

import contextlib
import logging
import os
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inventory.exceptions import (
    IntegrityError,
    InvalidArgumentError,
    InvalidReferenceError,
    PersistenceError,
    StoreError,
    ValidationError,
)
from inventory.models import Category, Item, ItemRef, List, ListRef, StoreData
from inventory.services import validation

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | BaseModel
Entity = TypeVar("Entity", Category, Item, List)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class Store:
    """Owns every category, item and list and persists them to one JSON file.

    Each mutation is validated, applied in memory, revalidated and then the whole
    aggregate is written to ``filepath`` before the call returns. Reads never touch
    the file.

    The store does no locking. Callers sharing one instance between threads must
    serialize every call themselves.
    """

    def __init__(self, filepath: str | os.PathLike[str], clock: Callable[[], datetime] = utcnow):
        if isinstance(filepath, str):
            validation.check_non_empty_string(filepath, "filepath", InvalidArgumentError)
        self.filepath = Path(filepath)
        self.clock = clock
        self.data = StoreData()

        if not self.load():
            self.data = StoreData()
            if not self.save():
                raise PersistenceError(f"could not create store file {self.filepath}")
            logger.info(f"Initialized empty store at {self.filepath}")

    # --- Persistence -------------------------------------------------------

    def load(self) -> bool:
        """Replace the in-memory aggregate with the file content.

        Returns False if the file does not exist. Raises PersistenceError if it
        exists but cannot be read or parsed.
        """
        try:
            content = self.filepath.read_bytes()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"Failed to read store file {self.filepath}: {e}")
            raise PersistenceError(f"could not read {self.filepath}: {e}") from e

        try:
            self.data = StoreData.model_validate_json(content)
        except PydanticValidationError as e:
            logger.error(f"Store file {self.filepath} is corrupt: {e}")
            raise PersistenceError(f"store file {self.filepath} is corrupt") from e

        logger.info(f"Loaded store from {self.filepath}: {self.counts()}")
        return True

    def save(self) -> bool:
        """Write the whole aggregate to the backing file.

        The content goes to a sibling temp file first which then replaces the
        target, so a crash mid-write never leaves a truncated store. Returns False
        (after logging) if writing fails; in-memory state is kept as is.
        """
        tmp_path = self.filepath.with_name(self.filepath.name + ".tmp")
        try:
            tmp_path.write_text(self.data.model_dump_json(by_alias=True), encoding="utf-8")
            os.replace(tmp_path, self.filepath)
        except OSError as e:
            logger.error(f"Failed to save store to {self.filepath}: {e}")
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            return False
        return True

    def _commit(self, action: str) -> None:
        if not self.save():
            raise PersistenceError(f"{action}, but saving {self.filepath} failed")
        logger.debug(f"Committed: {action}")

    def counts(self) -> dict[str, int]:
        """Number of entities in each collection."""
        return {
            "categories": len(self.data.categories),
            "items": len(self.data.items),
            "lists": len(self.data.lists),
        }

    # --- Categories --------------------------------------------------------

    def list_categories(self) -> list[Category]:
        return list(self.data.categories)

    def get_category(self, category_id: int) -> Category | None:
        validation.check_id(category_id)
        return _find(self.data.categories, category_id)

    def post_category(self, data: Payload) -> Category:
        fields = _payload(data)
        name = validation.check_non_empty_string(fields.get("name"), "name")

        now = self.clock()
        category = Category(
            id=self.data.next_category_id, name=name, created_at=now, modified_at=now
        )
        self._assert_valid_category(category)

        self.data.next_category_id += 1
        self.data.categories.append(category)
        self._commit(f"created category {category.id}")
        return category

    def patch_category(self, category_id: int, data: Payload) -> Category | None:
        """Apply the supplied fields of ``data`` to a category.

        Returns None if the category does not exist, and the stored object itself
        when nothing was supplied.
        """
        validation.check_id(category_id)
        fields = _payload(data)
        index = _index_of(self.data.categories, category_id)
        if index is None:
            return None

        changes: dict[str, Any] = {}
        if _supplied(fields, "name"):
            changes["name"] = validation.check_non_empty_string(fields["name"], "name")

        return self._apply_patch(
            self.data.categories, index, changes, self._assert_valid_category, "category"
        )

    def delete_category(self, category_id: int) -> bool:
        """Remove a category. Items keep any reference to it."""
        return self._delete(self.data.categories, category_id, "category")

    # --- Items -------------------------------------------------------------

    def list_items(self) -> list[Item]:
        return list(self.data.items)

    def get_item(self, item_id: int) -> Item | None:
        validation.check_id(item_id)
        return _find(self.data.items, item_id)

    def post_item(self, data: Payload) -> Item:
        fields = _payload(data)
        name = validation.check_non_empty_string(fields.get("name"), "name")
        category_ids = self._check_category_ids(fields.get("category_ids"))

        now = self.clock()
        item = Item(
            id=self.data.next_item_id,
            name=name,
            category_ids=category_ids,
            created_at=now,
            modified_at=now,
        )
        self._assert_valid_item(item)

        self.data.next_item_id += 1
        self.data.items.append(item)
        self._commit(f"created item {item.id}")
        return item

    def patch_item(self, item_id: int, data: Payload) -> Item | None:
        validation.check_id(item_id)
        fields = _payload(data)
        index = _index_of(self.data.items, item_id)
        if index is None:
            return None

        changes: dict[str, Any] = {}
        if _supplied(fields, "name"):
            changes["name"] = validation.check_non_empty_string(fields["name"], "name")
        if _supplied(fields, "category_ids"):
            changes["category_ids"] = self._check_category_ids(fields["category_ids"])

        return self._apply_patch(self.data.items, index, changes, self._assert_valid_item, "item")

    def delete_item(self, item_id: int) -> bool:
        """Remove an item. Lists keep any reference to it."""
        return self._delete(self.data.items, item_id, "item")

    def _check_category_ids(self, value: Any) -> list[int]:
        if value is None:
            return []
        category_ids = validation.check_sequence(value, "category_ids")
        for i, category_id in enumerate(category_ids):
            label = f"category_ids[{i}]"
            validation.check_id(category_id, label, ValidationError)
            if _find(self.data.categories, category_id) is None:
                raise InvalidReferenceError(
                    f"{label}: category with id {category_id} not found",
                    kind="category",
                    ref_id=category_id,
                    field=label,
                )
        return category_ids

    # --- Lists -------------------------------------------------------------

    def list_lists(self) -> list[List]:
        return list(self.data.lists)

    def get_list(self, list_id: int) -> List | None:
        validation.check_id(list_id)
        return _find(self.data.lists, list_id)

    def post_list(self, data: Payload) -> List:
        fields = _payload(data)
        name = validation.check_non_empty_string(fields.get("name"), "name")

        now = self.clock()
        new_list = List(
            id=self.data.next_list_id,
            name=name,
            item_refs=self._build_item_refs(fields.get("item_refs"), [], now),
            list_refs=self._build_list_refs(fields.get("list_refs"), [], now),
            created_at=now,
            modified_at=now,
        )
        _check_not_self_referencing(new_list.id, new_list.list_refs)
        self._assert_valid_list(new_list)

        self.data.next_list_id += 1
        self.data.lists.append(new_list)
        self._commit(f"created list {new_list.id}")
        return new_list

    def patch_list(self, list_id: int, data: Payload) -> List | None:
        """Apply the supplied fields of ``data`` to a list.

        Supplying ``item_refs`` or ``list_refs`` replaces the whole sequence and
        counts as a change even if the content is identical.
        """
        validation.check_id(list_id)
        fields = _payload(data)
        index = _index_of(self.data.lists, list_id)
        if index is None:
            return None
        existing = self.data.lists[index]

        now = self.clock()
        changes: dict[str, Any] = {}
        if _supplied(fields, "name"):
            changes["name"] = validation.check_non_empty_string(fields["name"], "name")
        if _supplied(fields, "item_refs"):
            changes["item_refs"] = self._build_item_refs(
                fields["item_refs"], existing.item_refs, now
            )
        if _supplied(fields, "list_refs"):
            changes["list_refs"] = self._build_list_refs(
                fields["list_refs"], existing.list_refs, now
            )
            _check_not_self_referencing(list_id, changes["list_refs"])

        return self._apply_patch(
            self.data.lists, index, changes, self._assert_valid_list, "list", now=now
        )

    def delete_list(self, list_id: int) -> bool:
        """Remove a list. Other lists keep any reference to it."""
        return self._delete(self.data.lists, list_id, "list")

    def _build_item_refs(self, value: Any, previous: list[ItemRef], now: datetime) -> list[ItemRef]:
        return self._build_refs(
            value, "item_refs", "item_id", "item", ItemRef, self.data.items, previous, now
        )

    def _build_list_refs(self, value: Any, previous: list[ListRef], now: datetime) -> list[ListRef]:
        return self._build_refs(
            value, "list_refs", "list_id", "list", ListRef, self.data.lists, previous, now
        )

    def _build_refs(
        self,
        value: Any,
        field: str,
        target_key: str,
        kind: str,
        ref_type: type[ItemRef] | type[ListRef],
        targets: list[Item] | list[List],
        previous: list[Any],
        now: datetime,
    ) -> list[Any]:
        """Validate raw refs and turn them into ref models.

        Refs without timestamps are stamped with ``now``, except that a ref
        targeting the same id as one in ``previous`` keeps its created_at, and its
        modified_at too when the count did not change.
        """
        if value is None:
            return []
        prior: dict[int, Any] = {}
        for ref in previous:
            prior.setdefault(getattr(ref, target_key), ref)

        refs = []
        for i, raw in enumerate(validation.check_sequence(value, field)):
            label = f"{field}[{i}]"
            ref_fields = _payload(raw, label, ValidationError)
            target_id = validation.check_id(
                ref_fields.get(target_key), f"{label}.{target_key}", ValidationError
            )
            count = validation.check_count(ref_fields.get("count"), f"{label}.count")
            if _find(targets, target_id) is None:
                raise InvalidReferenceError(
                    f"{label}: {kind} with id {target_id} not found",
                    kind=kind,
                    ref_id=target_id,
                    field=label,
                )
            created_at, modified_at = _ref_timestamps(
                ref_fields, prior.get(target_id), count, now, label
            )
            refs.append(
                ref_type(
                    **{target_key: target_id},
                    count=count,
                    created_at=created_at,
                    modified_at=modified_at,
                )
            )
        return refs

    # --- Shared mutation helpers -------------------------------------------

    def _apply_patch(
        self,
        collection: list[Entity],
        index: int,
        changes: dict[str, Any],
        revalidate: Callable[[Entity, Entity], None],
        kind: str,
        now: datetime | None = None,
    ) -> Entity:
        existing = collection[index]
        if not changes:
            return existing

        changes["modified_at"] = now or self.clock()
        updated = existing.model_copy(update=changes)
        revalidate(updated, existing)

        collection[index] = updated
        self._commit(f"updated {kind} {updated.id}")
        return updated

    def _delete(self, collection: list[Entity], entity_id: int, kind: str) -> bool:
        validation.check_id(entity_id)
        index = _index_of(collection, entity_id)
        if index is None:
            return False
        del collection[index]
        self._commit(f"deleted {kind} {entity_id}")
        return True

    # --- Revalidation ------------------------------------------------------
    #
    # ``previous`` is the stored version of a patched entity. References it
    # already held may dangle after a delete and are carried over unchecked;
    # every other reference was checked on entry and must still resolve.

    def _assert_valid_category(
        self, category: Category, previous: Category | None = None
    ) -> None:
        label = f"category {category.id}"
        validation.check_id(category.id, f"{label}: id", IntegrityError)
        validation.check_non_empty_string(category.name, f"{label}: name", IntegrityError)
        validation.check_timestamps(
            category.created_at, category.modified_at, label, IntegrityError
        )

    def _assert_valid_item(self, item: Item, previous: Item | None = None) -> None:
        label = f"item {item.id}"
        carried = set(previous.category_ids) if previous else set()
        validation.check_id(item.id, f"{label}: id", IntegrityError)
        validation.check_non_empty_string(item.name, f"{label}: name", IntegrityError)
        for category_id in item.category_ids:
            validation.check_id(category_id, f"{label}: category id", IntegrityError)
            if category_id not in carried and _find(self.data.categories, category_id) is None:
                raise IntegrityError(f"{label}: references missing category {category_id}")
        validation.check_timestamps(item.created_at, item.modified_at, label, IntegrityError)

    def _assert_valid_list(self, inventory_list: List, previous: List | None = None) -> None:
        label = f"list {inventory_list.id}"
        carried_items = {ref.item_id for ref in previous.item_refs} if previous else set()
        carried_lists = {ref.list_id for ref in previous.list_refs} if previous else set()
        validation.check_id(inventory_list.id, f"{label}: id", IntegrityError)
        validation.check_non_empty_string(inventory_list.name, f"{label}: name", IntegrityError)

        for i, item_ref in enumerate(inventory_list.item_refs):
            ref_label = f"{label}: item_refs[{i}]"
            validation.check_id(item_ref.item_id, ref_label, IntegrityError)
            validation.check_count(item_ref.count, ref_label, IntegrityError)
            missing = _find(self.data.items, item_ref.item_id) is None
            if missing and item_ref.item_id not in carried_items:
                raise IntegrityError(f"{ref_label}: references missing item {item_ref.item_id}")
            validation.check_timestamps(
                item_ref.created_at, item_ref.modified_at, ref_label, IntegrityError
            )

        for i, list_ref in enumerate(inventory_list.list_refs):
            ref_label = f"{label}: list_refs[{i}]"
            validation.check_id(list_ref.list_id, ref_label, IntegrityError)
            validation.check_count(list_ref.count, ref_label, IntegrityError)
            if list_ref.list_id == inventory_list.id:
                raise IntegrityError(f"{ref_label}: circular reference")
            missing = _find(self.data.lists, list_ref.list_id) is None
            if missing and list_ref.list_id not in carried_lists:
                raise IntegrityError(f"{ref_label}: references missing list {list_ref.list_id}")
            validation.check_timestamps(
                list_ref.created_at, list_ref.modified_at, ref_label, IntegrityError
            )

        validation.check_timestamps(
            inventory_list.created_at, inventory_list.modified_at, label, IntegrityError
        )


def _payload(
    data: Any, label: str = "payload", error: type[StoreError] = InvalidArgumentError
) -> dict[str, Any]:
    """Fields of a mapping or of a pydantic model (only those explicitly set)."""
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return validation.check_mapping(data, label, error)


def _supplied(fields: dict[str, Any], key: str) -> bool:
    return fields.get(key) is not None


def _find(collection: list[Entity], entity_id: int) -> Entity | None:
    for entity in collection:
        if entity.id == entity_id:
            return entity
    return None


def _index_of(collection: list[Entity], entity_id: int) -> int | None:
    for index, entity in enumerate(collection):
        if entity.id == entity_id:
            return index
    return None


def _check_not_self_referencing(list_id: int, list_refs: list[ListRef]) -> None:
    # Only direct self references are rejected; longer cycles are allowed.
    for i, list_ref in enumerate(list_refs):
        if list_ref.list_id == list_id:
            raise InvalidReferenceError(
                f"list_refs[{i}]: circular reference to list {list_id}",
                kind="list",
                ref_id=list_id,
                field=f"list_refs[{i}]",
            )


def _ref_timestamps(
    fields: dict[str, Any], previous: Any, count: int, now: datetime, label: str
) -> tuple[datetime, datetime]:
    created_at = fields.get("created_at")
    modified_at = fields.get("modified_at")
    if created_at is None and modified_at is None:
        if previous is None:
            return now, now
        if previous.count == count:
            return previous.created_at, previous.modified_at
        return previous.created_at, now
    if created_at is None or modified_at is None:
        raise ValidationError(
            f"{label}: created_at and modified_at must be supplied together", field=label
        )
    validation.check_timestamps(created_at, modified_at, label)
    return created_at, modified_at
