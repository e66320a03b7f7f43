"""OrderBy — how a slot of rows is sorted before it is paginated."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

from kvtable.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from kvtable.row import Row

Comparator: TypeAlias = Callable[[Any, Any], int]


@dataclass(frozen=True)
class Ascending:
    """Sort by primary key, smallest first."""

    def sort(self, rows: list[Row[Any]]) -> list[Row[Any]]:
        return sorted(rows, key=lambda row: row.pkey)


@dataclass(frozen=True)
class Descending:
    """Sort by primary key, largest first."""

    def sort(self, rows: list[Row[Any]]) -> list[Row[Any]]:
        return sorted(rows, key=lambda row: row.pkey, reverse=True)


@dataclass(frozen=True)
class CustomComparator:
    """Sort with a three-way comparator over the rows' ``data`` values.

    The comparator receives two data values (never the row wrappers) and
    returns a negative number, zero or a positive number.  The sort is
    stable, but rows the comparator ranks equal keep their scan order,
    which the store does not specify.
    """

    compare: Comparator

    def sort(self, rows: list[Row[Any]]) -> list[Row[Any]]:
        key = cmp_to_key(lambda a, b: self.compare(a.data, b.data))
        return sorted(rows, key=key)


OrderBy: TypeAlias = Ascending | Descending | CustomComparator
OrderByLike: TypeAlias = OrderBy | Literal["asc", "desc"] | Comparator

ASC = Ascending()
DESC = Descending()


def resolve_order(order_by: object) -> OrderBy:
    """Turn ``"asc"``, ``"desc"``, a comparator or an ``OrderBy`` into an ``OrderBy``."""
    if isinstance(order_by, (Ascending, Descending, CustomComparator)):
        return order_by
    if order_by == "asc":
        return ASC
    if order_by == "desc":
        return DESC
    if not callable(order_by):
        raise InvalidArgumentError(
            f"order_by must be asc, desc, or a comparator, got {order_by!r}"
        )
    return CustomComparator(order_by)
