import random

from config import CONTAINERS, SIDES
from populate_db import DEMO_NAMES, MAX_QUANTITY, seed_products


def test_seed_products_uses_default_locations(store):
    inserted = seed_products(store, 25, random.Random(7))

    products = store.list_all()
    assert inserted == len(products) == 25
    for p in products:
        assert p.name in DEMO_NAMES
        assert p.container in CONTAINERS
        assert p.side in SIDES
        assert 0 <= p.quantity <= MAX_QUANTITY


def test_seed_is_repeatable_with_same_seed(store):
    seed_products(store, 5, random.Random(1))
    first = [(p.name, p.container, p.side, p.shelf, p.quantity) for p in store.list_all(order_by=("id",))]

    store.clear()
    seed_products(store, 5, random.Random(1))
    second = [(p.name, p.container, p.side, p.shelf, p.quantity) for p in store.list_all(order_by=("id",))]

    assert first == second
