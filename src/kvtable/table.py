"""Table — auto-incrementing records on top of a flat key-value store."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from kvtable.codec import Codec, JsonCodec
from kvtable.exceptions import DeserializationError, InvalidArgumentError, InvalidOperationError
from kvtable.order import OrderByLike, resolve_order
from kvtable.row import Row
from kvtable.slots import FullScanSlotReader, SlotReader

if TYPE_CHECKING:
    from kvtable.stores.base import Store

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEPARATOR = ":"
COUNTER_SUFFIX = "max"


class Table(Generic[T]):
    """A named collection of records with auto-incrementing primary keys.

    Every key the table writes lives under its namespace prefix
    ``"<name>:"``.  Records are stored as ``"<name>:<pkey>"`` and the last
    issued primary key is kept under the reserved counter key
    ``"<name>:max"``.  The counter starts at ``-1`` and only moves forward
    on :meth:`create`, so primary keys are never reused, even after
    :meth:`delete` or :meth:`truncate`.

    Tables are normally obtained through
    :meth:`kvtable.registry.TableRegistry.get_or_create`, which calls
    :meth:`load` once before handing the table out.

    Parameters:
        name:        Table name; must be non-empty and free of ``":"``.
        store:       Backend holding the table's keys.
        codec:       Value codec.  Defaults to a :class:`JsonCodec` over ``JsonValue``.
        slot_reader: Strategy answering :meth:`slot`.  Defaults to
                     :class:`FullScanSlotReader`.
    """

    def __init__(
        self,
        name: str,
        store: Store,
        *,
        codec: Codec[T] | None = None,
        slot_reader: SlotReader | None = None,
    ) -> None:
        validate_table_name(name)
        self._name = name
        self._store = store
        self._codec: Codec[T] = codec if codec is not None else JsonCodec()
        self._slot_reader = slot_reader if slot_reader is not None else FullScanSlotReader()
        self._max_primary_key = -1
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def codec(self) -> Codec[T]:
        return self._codec

    @property
    def namespace(self) -> str:
        return f"{self._name}{SEPARATOR}"

    @property
    def counter_key(self) -> str:
        return f"{self.namespace}{COUNTER_SUFFIX}"

    @property
    def max_primary_key(self) -> int:
        """The last primary key issued, ``-1`` if none ever was."""
        return self._max_primary_key

    # ── counter ──────────────────────────────────────────────

    async def load(self) -> None:
        """Read the persisted counter, initialising it to ``-1`` when missing."""
        raw = await self._store.get(self.counter_key)
        if raw is None:
            await self._write_counter(-1)
            logger.debug("Initialised counter of table %r", self._name)
            return
        try:
            self._max_primary_key = int(raw)
        except ValueError as e:
            raise DeserializationError(self.counter_key, f"counter is not an integer: {raw!r}") from e
        logger.debug("Loaded table %r with counter %d", self._name, self._max_primary_key)

    async def reset_counter(self) -> None:
        """Set the counter back to ``-1``.

        Records are left alone; call :meth:`truncate` first to get a table
        that behaves as freshly created.
        """
        async with self._lock:
            await self._write_counter(-1)
        logger.debug("Reset counter of table %r", self._name)

    async def _write_counter(self, value: int) -> None:
        await self._store.set(self.counter_key, str(value))
        self._max_primary_key = value

    # ── keys ─────────────────────────────────────────────────

    def key_for(self, pkey: int | str) -> str:
        return f"{self.namespace}{pkey}"

    def owns_key(self, key: str) -> bool:
        """``True`` if *key* lies inside this table's namespace (counter included)."""
        return key.startswith(self.namespace)

    def is_record_key(self, key: str) -> bool:
        return self.owns_key(key) and key != self.counter_key

    def pkey_from_key(self, key: str) -> int:
        """Decode a record key into its primary key.

        Only defined for keys where :meth:`is_record_key` holds.
        """
        suffix = key[len(self.namespace) :]
        try:
            return int(suffix)
        except ValueError as e:
            raise DeserializationError(key, f"{suffix!r} is not a primary key") from e

    # ── CRUD ─────────────────────────────────────────────────

    async def create(self, data: T) -> int:
        """Store *data* under a newly issued primary key and return that key."""
        raw = self._codec.encode(data)
        async with self._lock:
            pkey = self._max_primary_key + 1
            await self._write_counter(pkey)
            await self._store.set(self.key_for(pkey), raw)
        return pkey

    async def read(self, pkey: int) -> T | None:
        """Return the record stored under *pkey*, or ``None`` if there is none."""
        key = self.key_for(pkey)
        raw = await self._store.get(key)
        if raw is None:
            return None
        return self._codec.decode(raw, key=key)

    async def exists(self, pkey: int) -> bool:
        return await self._store.get(self.key_for(pkey)) is not None

    async def update(self, pkey: int | str, data: T) -> None:
        """Overwrite the record stored under *pkey*.

        Existence is not checked: updating a primary key that holds no
        record writes one, and the counter is not moved.  A key above
        :attr:`max_primary_key` written this way will be overwritten by a
        later :meth:`create` that reaches it.

        Raises:
            InvalidOperationError: If *pkey* names the reserved counter key.
        """
        self._reject_counter_key(pkey)
        await self._store.set(self.key_for(pkey), self._codec.encode(data))

    async def delete(self, pkey: int | str) -> None:
        """Remove the record stored under *pkey*.  No-op if there is none.

        Raises:
            InvalidOperationError: If *pkey* names the reserved counter key.
        """
        self._reject_counter_key(pkey)
        await self._store.remove(self.key_for(pkey))

    def _reject_counter_key(self, pkey: int | str) -> None:
        if pkey == COUNTER_SUFFIX:
            raise InvalidOperationError(
                self._name, f"'{self.counter_key}' is reserved for the primary key counter"
            )

    async def count(self) -> int:
        """Number of records in the table (the counter key is not a record)."""
        return sum(1 for key in await self._store.keys() if self.is_record_key(key))

    async def truncate(self) -> None:
        """Delete every record but keep the counter, like ``TRUNCATE`` in a real database."""
        async with self._lock:
            removed = 0
            for key in await self._store.keys():
                if self.is_record_key(key):
                    await self._store.remove(key)
                    removed += 1
        logger.debug("Truncated table %r, %d records removed", self._name, removed)

    # ── scanning ─────────────────────────────────────────────

    async def scan(self) -> list[Row[T]]:
        """Decode every record of the table, in store enumeration order."""
        rows: list[Row[T]] = []
        for key in await self._store.keys():
            if not self.is_record_key(key):
                continue
            raw = await self._store.get(key)
            if raw is None:
                continue
            rows.append(Row(self.pkey_from_key(key), self._codec.decode(raw, key=key)))
        return rows

    async def slot(self, offset: int, count: int, order_by: OrderByLike) -> list[Row[T]]:
        """Return up to *count* records starting at *offset* once sorted by *order_by*.

        *order_by* is ``"asc"`` or ``"desc"`` (by primary key), a
        comparator over two ``data`` values, or an
        :data:`~kvtable.order.OrderBy` instance.  Fewer than *count* rows
        come back when the table runs out, none when *offset* is past the
        end.

        Raises:
            InvalidArgumentError: If *order_by* is none of the above, or
                *offset* / *count* is negative.
        """
        if offset < 0 or count < 0:
            raise InvalidArgumentError(
                f"offset and count must be non-negative, got offset={offset}, count={count}"
            )
        order = resolve_order(order_by)
        return await self._slot_reader.read(self, offset, count, order)

    def __repr__(self) -> str:
        return f"Table(name={self._name!r}, max_primary_key={self._max_primary_key})"


def validate_table_name(name: str) -> None:
    if not name:
        raise InvalidArgumentError("Table name must not be empty")
    if SEPARATOR in name:
        raise InvalidArgumentError(f"Table name must not contain {SEPARATOR!r}, got {name!r}")
