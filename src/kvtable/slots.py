"""Slot readers — ordered, paginated views over a table's records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kvtable.order import OrderBy
    from kvtable.row import Row
    from kvtable.table import Table


class SlotReader(ABC):
    """Strategy that answers ``Table.slot`` calls.

    ``offset`` and ``count`` are already validated as non-negative and
    ``order`` is already resolved when a reader is called.
    """

    @abstractmethod
    async def read(
        self,
        table: Table[Any],
        offset: int,
        count: int,
        order: OrderBy,
    ) -> list[Row[Any]]:
        """Return at most *count* rows starting at *offset* in *order*."""
        ...


class FullScanSlotReader(SlotReader):
    """Scan every record of the table, sort the lot, then slice.

    Cost is proportional to the number of keys in the whole store, not to
    *count*: there is no index to seek into.
    """

    async def read(
        self,
        table: Table[Any],
        offset: int,
        count: int,
        order: OrderBy,
    ) -> list[Row[Any]]:
        rows = await table.scan()
        return order.sort(rows)[offset : offset + count]
