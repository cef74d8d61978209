import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from main import create_app  # noqa: E402
from schemas.product import ProductForm  # noqa: E402
from utils.product_store import ProductStore  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    store = ProductStore.from_url(str(tmp_path / "inventory.db"))
    assert store.ensure_schema()
    yield store
    store.dispose()


@pytest.fixture()
def client(store):
    with TestClient(create_app(store)) as client:
        yield client


@pytest.fixture()
def add_product(store):
    def _add(name="Tent pegs", container=1, side="A", shelf=1, quantity=5):
        return store.insert(ProductForm(
            name=name, container=container, side=side, shelf=shelf, quantity=quantity,
        ))
    return _add
