"""Row — a record returned by a slot, paired with its primary key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Row(Generic[T]):
    """Immutable ``(pkey, data)`` pair.

    Attributes:
        pkey: Primary key the record is stored under.
        data: The decoded record value.
    """

    pkey: int
    data: T

    def to_dict(self) -> dict[str, Any]:
        return {"pkey": self.pkey, "data": self.data}
