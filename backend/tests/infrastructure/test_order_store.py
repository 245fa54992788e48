"""In-Memory Order Store: repository contract.

Invariants:
    - list_all preserves insertion order and returns a copy
    - replace updates in place (position preserved)
    - insert of a duplicate id raises OrderConflictError
    - replace/remove of an unknown id raise ResourceNotFoundError
"""

from datetime import datetime
from decimal import Decimal
from uuid import uuid4

import pytest

from orderdesk.core.domain_types import Order, OrderId
from orderdesk.core.errors import OrderConflictError, ResourceNotFoundError
from orderdesk.infrastructure import order_store as store_module
from orderdesk.infrastructure.order_store import (
    InMemoryOrderStore, get_order_repository, init_order_store,
)


def _order(client: str = "Acme") -> Order:
    return Order(
        id=OrderId(uuid4()), client=client,
        date=datetime(2024, 1, 1), total=Decimal("10"),
    )


async def test_list_all_preserves_insertion_order():
    store = InMemoryOrderStore()
    orders = [_order("a"), _order("b"), _order("c")]
    for o in orders:
        await store.insert(o)
    assert await store.list_all() == orders


async def test_list_all_returns_copy():
    store = InMemoryOrderStore()
    await store.insert(_order())
    snapshot = await store.list_all()
    snapshot.clear()
    assert await store.count() == 1


async def test_get_unknown_returns_none():
    assert await InMemoryOrderStore().get(OrderId(uuid4())) is None


async def test_insert_duplicate_raises_conflict():
    store = InMemoryOrderStore()
    order = _order()
    await store.insert(order)
    with pytest.raises(OrderConflictError):
        await store.insert(order)
    assert await store.count() == 1


async def test_replace_keeps_position():
    store = InMemoryOrderStore()
    a, b, c = _order("a"), _order("b"), _order("c")
    for o in (a, b, c):
        await store.insert(o)
    renamed = a.with_fields("a2", a.date, a.total)
    await store.replace(renamed)
    assert [o.client for o in await store.list_all()] == ["a2", "b", "c"]


async def test_replace_unknown_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        await InMemoryOrderStore().replace(_order())


async def test_remove_unknown_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        await InMemoryOrderStore().remove(OrderId(uuid4()))


async def test_remove_deletes_only_target():
    store = InMemoryOrderStore()
    a, b = _order("a"), _order("b")
    await store.insert(a)
    await store.insert(b)
    await store.remove(a.id)
    assert await store.list_all() == [b]


def test_get_order_repository_is_none_before_init(monkeypatch):
    monkeypatch.setattr(store_module, "order_store", None)
    assert get_order_repository() is None


def test_init_order_store_installs_fresh_singleton(monkeypatch):
    monkeypatch.setattr(store_module, "order_store", None)
    store = init_order_store()
    assert get_order_repository() is store
