"""InMemoryStore — zero-config, dict-backed storage for development and testing."""

from __future__ import annotations

from kvtable.stores.base import Store


class InMemoryStore(Store):
    """In-memory store using a plain dict.  Data is lost on process exit."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def keys(self) -> list[str]:
        return list(self._data)

    async def clear(self) -> None:
        self._data.clear()
