"""Pytest configuration and fixtures"""
import os
import time

# Set test environment variables (przed importem rocketcart)
os.environ.setdefault("CART_STORE_BACKEND", "memory")
os.environ.setdefault("CELERY_TASK_ALWAYS_EAGER", "1")
os.environ.setdefault("HTTP_RETRY_ATTEMPTS", "1")
os.environ.setdefault("REDIS_RETRY_ATTEMPTS", "1")

import json
import pytest
import requests
from unittest.mock import Mock

from rocketcart.domain.schemas import Product, Stock
from rocketcart.repos.snapshot_repo import MemorySnapshotRepo
from rocketcart.services.cart_engine import CartEngine
from rocketcart.utils.settings import CART_STORAGE_KEY


PRODUCTS = {
    1: {"id": 1, "title": "Tenis de Caminhada Leve", "price": 179.9, "image": "tenis1.jpg"},
    2: {"id": 2, "title": "Tenis VR Caminhada", "price": 139.9, "image": "tenis2.jpg"},
    3: {"id": 3, "title": "Tenis Adidas Duramo Lite 2.0", "price": 219.9, "image": "tenis3.jpg"},
}


class FakeStockClient:
    """Stock service na slowniku, nieznane id -> HTTPError jak prawdziwy klient."""

    def __init__(self, stock, products=None, delay=0.0):
        self.stock = dict(stock)
        self.products = products or PRODUCTS
        self.delay = delay
        self.calls = []

    def get_stock(self, product_id):
        self.calls.append(("stock", product_id))
        if self.delay:
            time.sleep(self.delay)
        if product_id not in self.stock:
            raise requests.HTTPError(f"404 stock/{product_id}")
        return Stock(amount=self.stock[product_id])

    def get_product(self, product_id):
        self.calls.append(("product", product_id))
        if product_id not in self.products:
            raise requests.HTTPError(f"404 products/{product_id}")
        return Product.model_validate(self.products[product_id])


class FailingStore(MemorySnapshotRepo):
    """Store ktory moze odmowic zapisu/odczytu."""

    def __init__(self, initial=None, fail_get=False, fail_set=False):
        super().__init__(initial)
        self.fail_get = fail_get
        self.fail_set = fail_set

    def get(self, key):
        if self.fail_get:
            raise ConnectionError("store down")
        return super().get(key)

    def set(self, key, blob):
        if self.fail_set:
            raise ConnectionError("store down")
        super().set(key, blob)


def line(product_id, amount):
    return {**PRODUCTS[product_id], "amount": amount}


def seed(store, *lines):
    store.set(CART_STORAGE_KEY, json.dumps(list(lines)))


def dump(cart):
    return [item.model_dump() for item in cart]


@pytest.fixture
def stock_client():
    return FakeStockClient({1: 5, 2: 3, 3: 1})


@pytest.fixture
def store():
    return MemorySnapshotRepo()


@pytest.fixture
def notifier():
    return Mock()


@pytest.fixture
def make_engine(stock_client, store, notifier):
    def _make(**overrides):
        return CartEngine(
            stock_client=overrides.get("stock_client", stock_client),
            store=overrides.get("store", store),
            notifier=overrides.get("notifier", notifier),
        )

    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()
