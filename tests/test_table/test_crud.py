"""Tests for Table create/read/update/delete/count/truncate."""

import pytest

from kvtable import InvalidOperationError


async def test_counter_starts_at_minus_one(todos, store):
    assert todos.max_primary_key == -1
    assert await todos.count() == 0
    assert await store.get("todos:max") == "-1"


async def test_create(todos):
    pkey = await todos.create("a")
    assert pkey == 0
    assert await todos.count() == 1
    assert todos.max_primary_key == 0


async def test_create_writes_namespaced_keys(todos, store):
    await todos.create("a")
    assert await store.get("todos:0") == '"a"'
    assert await store.get("todos:max") == "0"


async def test_read(todos):
    await todos.create("a")
    assert await todos.read(0) == "a"
    assert await todos.count() == 1
    assert todos.max_primary_key == 0


async def test_read_missing_returns_none(todos):
    assert await todos.read(42) is None


async def test_update(todos):
    await todos.create("a")
    await todos.update(0, "b")
    assert await todos.read(0) == "b"
    assert await todos.count() == 1
    assert todos.max_primary_key == 0


async def test_update_missing_pkey_writes_without_moving_counter(todos):
    await todos.update(5, "ghost")
    assert await todos.read(5) == "ghost"
    assert await todos.count() == 1
    assert todos.max_primary_key == -1


async def test_delete(todos):
    pkey = await todos.create("a")
    await todos.delete(pkey)
    assert await todos.read(pkey) is None
    assert await todos.count() == 0
    assert todos.max_primary_key == 0


async def test_delete_missing_is_noop(todos):
    await todos.delete(7)
    assert await todos.count() == 0


async def test_delete_counter_key_is_rejected(todos, store):
    await todos.create("a")
    with pytest.raises(InvalidOperationError, match="todos:max"):
        await todos.delete("max")
    assert await store.get("todos:max") == "0"
    assert todos.max_primary_key == 0


async def test_update_counter_key_is_rejected(todos, store):
    await todos.create("a")
    with pytest.raises(InvalidOperationError, match="todos:max"):
        await todos.update("max", "oops")
    assert await store.get("todos:max") == "0"
    assert await todos.create("b") == 1


async def test_exists(todos):
    assert not await todos.exists(0)
    await todos.create("a")
    assert await todos.exists(0)


async def test_auto_increment(todos):
    assert [await todos.create(v) for v in "abc"] == [0, 1, 2]
    assert await todos.count() == 3
    assert todos.max_primary_key == 2


async def test_pkeys_not_reused_after_delete(todos):
    await todos.create("a")
    await todos.create("b")
    await todos.delete(1)
    assert await todos.create("c") == 2


async def test_json_encoding(todos):
    todo = {"what": "go to the pool", "when": "tomorrow", "tags": ["sport"], "n": 1.5}
    await todos.create(todo)
    retrieved = await todos.read(0)
    assert isinstance(retrieved, dict)
    assert retrieved == todo


# ── truncate ─────────────────────────────────────────────────


async def test_truncate_keeps_counter(todos):
    await todos.create("a")
    await todos.create("b")
    assert await todos.count() == 2

    await todos.truncate()
    assert await todos.count() == 0
    assert todos.max_primary_key == 1

    assert await todos.create("c") == 2
    assert await todos.count() == 1
    assert todos.max_primary_key == 2


async def test_truncate_empty_table(todos):
    await todos.truncate()
    assert await todos.count() == 0
    assert todos.max_primary_key == -1


async def test_truncate_only_touches_own_table(todos, cars):
    await todos.create("a")
    await cars.create("x")

    await todos.truncate()
    assert await todos.count() == 0
    assert await cars.count() == 1

    await todos.create("b")
    await cars.create("y")
    assert await todos.count() == 1
    assert await cars.count() == 2
    assert todos.max_primary_key == 1
    assert cars.max_primary_key == 1


async def test_reset_counter(todos, store):
    await todos.create("a")
    await todos.truncate()
    await todos.reset_counter()
    assert todos.max_primary_key == -1
    assert await store.get("todos:max") == "-1"
    assert await todos.create("b") == 0


async def test_similar_names_do_not_share_keys(registry):
    car = await registry.get_or_create("car")
    cars = await registry.get_or_create("cars")
    await cars.create("x")
    assert await car.count() == 0
    assert await cars.count() == 1


# ── key helpers ──────────────────────────────────────────────


def test_key_helpers(todos):
    assert todos.namespace == "todos:"
    assert todos.counter_key == "todos:max"
    assert todos.key_for(3) == "todos:3"
    assert todos.is_record_key("todos:3")
    assert not todos.is_record_key("todos:max")
    assert todos.owns_key("todos:max")
    assert not todos.owns_key("todosx:3")
    assert todos.pkey_from_key("todos:12") == 12
