"""Store configuration and the factory that turns it into a backend."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from kvtable.exceptions import StoreError
from kvtable.stores import InMemoryStore, SQLiteStore, Store


class StoreConfig(BaseModel):
    """Which backend to persist tables in.

    Attributes:
        type: Store type ("memory" or "sqlite")
        path: Path to SQLite database file (for sqlite type)
    """

    type: Literal["memory", "sqlite"] = "memory"
    path: str = ""


def create_store(config: StoreConfig) -> Store:
    """Create a store from configuration.

    Raises:
        StoreError: If a sqlite store is requested without a path.
    """
    if config.type == "sqlite":
        if not config.path:
            raise StoreError("create_store", "SQLite store requires 'path' configuration")
        return SQLiteStore(config.path)
    return InMemoryStore()
