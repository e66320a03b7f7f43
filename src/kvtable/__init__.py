"""kvtable — tables with auto-incrementing primary keys on a flat key-value store.

Ask a :class:`TableRegistry` for a table by name, then create, read,
update, delete, count, truncate, or page through its records in order.
"""

from kvtable.config import StoreConfig, create_store
from kvtable.exceptions import (
    CodecError,
    DeserializationError,
    InvalidArgumentError,
    InvalidOperationError,
    SerializationError,
    StoreError,
    TableError,
)
from kvtable.order import ASC, DESC, Ascending, CustomComparator, Descending, OrderBy
from kvtable.registry import TableRegistry
from kvtable.row import Row
from kvtable.table import Table

__all__ = [
    "ASC",
    "DESC",
    "Ascending",
    "CodecError",
    "CustomComparator",
    "Descending",
    "DeserializationError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "OrderBy",
    "Row",
    "SerializationError",
    "StoreConfig",
    "StoreError",
    "Table",
    "TableError",
    "TableRegistry",
    "create_store",
]
