"""Storage backends for table persistence."""

from kvtable.stores.base import Store
from kvtable.stores.memory import InMemoryStore
from kvtable.stores.sqlite import SQLiteStore

__all__ = ["InMemoryStore", "SQLiteStore", "Store"]
