"""Errors raised by the inventory store."""


class StoreError(Exception):
    """Base class for all store errors."""


class InvalidArgumentError(StoreError, ValueError):
    """An argument has the wrong shape (bad id, payload that is not a mapping)."""


class ValidationError(StoreError, ValueError):
    """Payload content violates a domain rule."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class InvalidReferenceError(ValidationError):
    """A reference points at an entity that does not exist, or at the list itself."""

    def __init__(self, message: str, kind: str, ref_id: int, field: str | None = None):
        super().__init__(message, field=field)
        self.kind = kind
        self.ref_id = ref_id


class PersistenceError(StoreError):
    """The backing file could not be read or written."""


class IntegrityError(StoreError):
    """A stored entity failed revalidation right before being persisted.

    Input has already passed the entry-point checks when this is raised, so it
    always points at a bug in the store rather than at bad caller input.
    """
