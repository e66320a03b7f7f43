"""SQLiteStore — durable, single-file storage backend using aiosqlite."""

from __future__ import annotations

import logging

try:
    import aiosqlite
except ImportError as exc:
    raise ImportError(
        "SQLiteStore requires the 'aiosqlite' package. "
        "Install it with: pip install kv-tables[sqlite]"
    ) from exc

from kvtable.stores.base import Store

logger = logging.getLogger(__name__)

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS kv_store (
    key   TEXT NOT NULL PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class SQLiteStore(Store):
    """Persistent store backed by a single SQLite file.

    Parameters:
        db_path: Path to the SQLite database file.  Use ``":memory:"``
                 for an in-memory database (useful for testing).
    """

    def __init__(self, db_path: str = "kv_store.db") -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None

    async def _connect(self) -> aiosqlite.Connection:
        if self._db is None:
            logger.debug("Opening SQLite store at %s", self._db_path)
            self._db = await aiosqlite.connect(self._db_path)
            await self._db.execute(_CREATE_TABLE)
            await self._db.commit()
        return self._db

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    # ── Store protocol ───────────────────────────────────────

    async def get(self, key: str) -> str | None:
        db = await self._connect()
        cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
        row = await cursor.fetchone()
        if row is None:
            return None
        value: str = row[0]
        return value

    async def set(self, key: str, value: str) -> None:
        db = await self._connect()
        await db.execute(
            "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
            (key, value),
        )
        await db.commit()

    async def remove(self, key: str) -> None:
        db = await self._connect()
        await db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        await db.commit()

    async def keys(self) -> list[str]:
        db = await self._connect()
        cursor = await db.execute("SELECT key FROM kv_store")
        rows = await cursor.fetchall()
        return [row[0] for row in rows]

    async def clear(self) -> None:
        db = await self._connect()
        await db.execute("DELETE FROM kv_store")
        await db.commit()
