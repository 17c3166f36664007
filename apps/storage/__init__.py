from .base import EntityStore
from .exceptions import DuplicateRecordError, StorageError
from .memory import MemoryStore
from .selection import get_store, reset_store, set_store

__all__ = [
    'EntityStore',
    'MemoryStore',
    'get_store',
    'set_store',
    'reset_store',
    'StorageError',
    'DuplicateRecordError',
]
