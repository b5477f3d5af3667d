import pytest
from fastapi.testclient import TestClient

from rocketcart.main import create_app
from rocketcart.services.cart_engine import ADD_ERROR_MESSAGE, STOCK_LIMIT_MESSAGE
from tests.conftest import line


@pytest.fixture
def client(engine):
    return TestClient(create_app(engine))


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_cart_flow(client):
    assert client.get("/cart/").json() == {"items": []}

    resp = client.post("/cart/items", json={"product_id": 1})
    assert resp.status_code == 200
    assert resp.json() == {"items": [line(1, 1)]}

    resp = client.put("/cart/items/1", json={"amount": 4})
    assert resp.json() == {"items": [line(1, 4)]}

    resp = client.delete("/cart/items/1")
    assert resp.json() == {"items": []}


def test_rejection_returns_unchanged_cart(client, notifier):
    client.post("/cart/items", json={"product_id": 3})

    resp = client.post("/cart/items", json={"product_id": 3})

    assert resp.status_code == 200
    assert resp.json() == {"items": [line(3, 1)]}
    notifier.error.assert_called_once_with(STOCK_LIMIT_MESSAGE)


def test_invalid_body(client):
    resp = client.post("/cart/items", json={"product_id": "abc"})
    assert resp.status_code == 422


def test_non_positive_product_id_goes_to_engine(client, notifier, stock_client):
    resp = client.post("/cart/items", json={"product_id": 0})

    assert resp.status_code == 200
    assert resp.json() == {"items": []}
    assert ("stock", 0) in stock_client.calls
    notifier.error.assert_called_once_with(ADD_ERROR_MESSAGE)
