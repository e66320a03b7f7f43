"""
kvtable — Hello World

Ask the registry for a table, then create, read, update, delete and
page through its records.  Primary keys auto-increment and are never
reused, even after a truncate.
"""

import asyncio

from pydantic import BaseModel

from kvtable import TableRegistry
from kvtable.stores import SQLiteStore


class Person(BaseModel):
    name: str
    age: int


def by_name(a: Person, b: Person) -> int:
    return (a.name > b.name) - (a.name < b.name)


async def main():
    # ──────────────────────────────────────
    #  1. Create the registry
    # ──────────────────────────────────────
    registry = TableRegistry(SQLiteStore(":memory:"))

    # ──────────────────────────────────────
    #  2. Untyped table: any JSON value
    # ──────────────────────────────────────
    todos = await registry.get_or_create("todos")
    for what in ["buy milk", "walk the dog", "call mum"]:
        pkey = await todos.create({"what": what, "done": False})
        print(f"  created todo {pkey}")

    await todos.update(1, {"what": "walk the dog", "done": True})
    await todos.delete(0)
    print(f"  {await todos.count()} todos left, last pkey {todos.max_primary_key}")

    for row in await todos.slot(0, 10, "desc"):
        print(f"  [{row.pkey}] {row.data}")

    # ──────────────────────────────────────
    #  3. Typed table: values come back as models
    # ──────────────────────────────────────
    people = await registry.get_or_create("people", Person)
    await people.create(Person(name="zoe", age=37))
    await people.create(Person(name="nou", age=33))

    for row in await people.slot(0, 2, by_name):
        print(f"  [{row.pkey}] {row.data.name} ({row.data.age})")

    # ──────────────────────────────────────
    #  4. Truncate keeps the counter
    # ──────────────────────────────────────
    await people.truncate()
    pkey = await people.create(Person(name="ada", age=36))
    print(f"  after truncate, next pkey is {pkey}")

    await registry.close()


if __name__ == "__main__":
    asyncio.run(main())
