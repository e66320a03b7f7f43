"""TableRegistry — hands out one Table instance per name."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pydantic import JsonValue

from kvtable.codec import JsonCodec
from kvtable.exceptions import InvalidArgumentError
from kvtable.stores.base import Store
from kvtable.stores.memory import InMemoryStore
from kvtable.table import Table, validate_table_name

logger = logging.getLogger(__name__)


class TableRegistry:
    """Maps table names to their single :class:`Table` instance.

    Construct one registry per store at startup and pass it to whoever
    needs tables.  Looking a name up twice returns the very same object,
    so every caller observes the same counter and records.

    Parameters:
        store: Persistence backend shared by all tables.  Defaults to
               :class:`InMemoryStore` when omitted.
    """

    def __init__(self, store: Store | None = None) -> None:
        self._store: Store = store if store is not None else InMemoryStore()
        self._tables: dict[str, Table[Any]] = {}
        self._lock = asyncio.Lock()

    async def get_or_create(self, name: str, value_type: Any = None) -> Table[Any]:
        """Return the table called *name*, creating and loading it on first use.

        Parameters:
            name:       Table name.
            value_type: Type the table's values are validated against on
                        read (see :class:`~kvtable.codec.JsonCodec`).  Only
                        used when the table is first created; ``None`` means
                        "whatever the table already has", ``JsonValue`` on creation.

        Raises:
            InvalidArgumentError: If *name* is invalid, or *value_type*
                differs from the type the existing table was created with.
        """
        validate_table_name(name)
        table = self._tables.get(name)
        if table is None:
            async with self._lock:
                table = self._tables.get(name)
                if table is None:
                    codec: JsonCodec[Any] = JsonCodec(
                        JsonValue if value_type is None else value_type
                    )
                    table = Table(name, self._store, codec=codec)
                    await table.load()
                    self._tables[name] = table
                    logger.debug("Registered table %r", name)
                    return table
        self._check_value_type(table, value_type)
        return table

    get_table = get_or_create

    def _check_value_type(self, table: Table[Any], value_type: Any) -> None:
        if value_type is None:
            return
        existing = getattr(table.codec, "value_type", JsonValue)
        if existing != value_type:
            raise InvalidArgumentError(
                f"Table {table.name!r} holds {existing!r} values, not {value_type!r}"
            )

    # ── introspection ────────────────────────────────────────

    def names(self) -> list[str]:
        """Return the names of all tables looked up so far, in lookup order."""
        return list(self._tables)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    @property
    def store(self) -> Store:
        return self._store

    async def close(self) -> None:
        """Close the underlying store if it holds resources."""
        if hasattr(self._store, "close"):
            await self._store.close()
