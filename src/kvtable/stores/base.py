"""Store protocol — flat, string-keyed persistence for table data."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Store(ABC):
    """Abstract base for all storage backends.

    A store is a single flat key space: every key and every value is a
    string.  Tables carve their own *namespace* out of it by prefixing
    keys (e.g. ``"todos:3"``); the store itself knows nothing about
    tables.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if not found."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a value.  No-op if the key does not exist."""
        ...

    @abstractmethod
    async def keys(self) -> list[str]:
        """Return every key currently stored, in no particular order."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Delete every key in the store."""
        ...
