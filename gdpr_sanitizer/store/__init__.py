"""Record stores for users and comments."""

from .base import RecordStore, hash_password
from .memory_store import InMemoryRecordStore
from .sql_store import SqlRecordStore

__all__ = ["RecordStore", "hash_password", "InMemoryRecordStore", "SqlRecordStore"]
