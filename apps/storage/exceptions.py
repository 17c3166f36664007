"""Storage-level exceptions."""


class StorageError(Exception):
    """Base exception for entity store errors."""
    pass


class DuplicateRecordError(StorageError):
    """Raised when a write would break a uniqueness constraint."""

    def __init__(self, entity, fields):
        self.entity = entity
        self.fields = tuple(fields)
        super().__init__(f"Duplicate {entity} for {', '.join(self.fields)}")
