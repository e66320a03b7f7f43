"""Shared test fixtures."""

import pytest
import pytest_asyncio

from kvtable import TableRegistry
from kvtable.stores import InMemoryStore


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def registry(store):
    return TableRegistry(store=store)


async def _fresh(registry, name):
    table = await registry.get_or_create(name)
    await table.truncate()
    await table.reset_counter()
    return table


@pytest_asyncio.fixture
async def todos(registry):
    return await _fresh(registry, "todos")


@pytest_asyncio.fixture
async def cars(registry):
    return await _fresh(registry, "cars")


@pytest_asyncio.fixture
async def eleven_each(todos, cars):
    """Interleave eleven creates in ``todos`` (a..m) and ``cars`` (1..11)."""
    for letter, number in zip("abcdefghilm", range(1, 12), strict=True):
        await todos.create(letter)
        await cars.create(number)
    return todos, cars
