"""
Pytest fixtures and configuration for commerce-store tests

This file provides shared fixtures that can be used across all test modules.

Date: 2026-10-18
"""
import itertools
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

from commerce_store.domain.ordering import customer_natural_key, product_natural_key
from commerce_store.repositories import DataStore

CLOCK_START = datetime(2025, 10, 17, 9, 0, 0)


@pytest.fixture
def clock():
    """
    Provides a mock clock that advances one second per call

    Scope: function (fresh sequence per test)
    """
    ticks = itertools.count()
    return Mock(side_effect=lambda: CLOCK_START + timedelta(seconds=next(ticks)))


@pytest.fixture
def store(clock):
    """
    Provides an empty DataStore driven by the mock clock
    """
    return DataStore(clock=clock)


@pytest.fixture
def populated_store(store):
    """
    Provides a store with 3 customers, 5 products and 2 orders

    Returns:
        (store, dict of named entities)
    """
    olena = store.create_customer("Olena", "olena@mail.com", 120)
    andrii = store.create_customer("Andrii", "andrii@mail.com", 45)
    maria = store.create_customer("Maria", "maria@mail.com", 200)

    laptop = store.create_product("Laptop", "Electronics", 32000)
    mouse = store.create_product("Mouse", "Electronics", 700)
    coffee = store.create_product("Coffee", "Food", 250)
    headphones = store.create_product("Headphones", "Electronics", 2200)
    tea = store.create_product("Tea", "Food", 180)

    first = store.create_order(olena.id)
    store.add_item_to_order(first.id, laptop.id, 1)
    store.add_item_to_order(first.id, mouse.id, 2)

    second = store.create_order(maria.id)
    store.add_item_to_order(second.id, coffee.id, 3)
    store.add_item_to_order(second.id, tea.id, 2)

    entities = {
        'olena': olena, 'andrii': andrii, 'maria': maria,
        'laptop': laptop, 'mouse': mouse, 'coffee': coffee,
        'headphones': headphones, 'tea': tea,
        'first_order': first, 'second_order': second,
    }
    return store, entities


def _assert_store_consistent(store: DataStore) -> None:
    customers = store.list_customers()
    products = store.list_products()
    orders = store.list_orders()

    # primary map <-> ordered views
    ordered_customers = store.list_customers_ordered()
    assert len(ordered_customers) == len(customers)
    assert {c.id for c in ordered_customers} == {c.id for c in customers}
    customer_keys = [customer_natural_key(c) for c in ordered_customers]
    assert customer_keys == sorted(customer_keys)

    ordered_products = store.list_products_ordered()
    assert len(ordered_products) == len(products)
    assert {p.id for p in ordered_products} == {p.id for p in products}
    product_keys = [product_natural_key(p) for p in ordered_products]
    assert product_keys == sorted(product_keys)

    # email uniqueness and email set coherence
    emails = [c.email for c in customers]
    assert len(emails) == len(set(emails))
    assert store._customer_emails == set(emails)

    # category soundness
    assert store.list_categories() == {p.category for p in products}

    # time view <-> orders
    by_time = store.list_orders_by_time()
    assert len(by_time) == len(orders)
    assert {order_id for _, order_id in by_time} == {o.id for o in orders}
    assert list(by_time) == sorted(by_time)
    created = {o.id: o.created_at for o in orders}
    assert all(created[order_id] == created_at for created_at, order_id in by_time)


@pytest.fixture
def assert_consistent():
    """
    Provides a checker for every store-level index invariant
    """
    return _assert_store_consistent
