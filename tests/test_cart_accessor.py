from unittest.mock import Mock

from rocketcart.services.cart_accessor import CartAccessor
from rocketcart.services.cart_engine import CartEngine
from tests.conftest import dump, line


def test_operations_are_delegated():
    engine = Mock(spec=CartEngine)
    accessor = CartAccessor(engine)

    accessor.add_product(1)
    accessor.remove_product(2)
    accessor.update_product_amount(3, 4)

    engine.add_product.assert_called_once_with(1)
    engine.remove_product.assert_called_once_with(2)
    engine.update_product_amount.assert_called_once_with(3, 4)


def test_cart_follows_engine_commits(engine):
    accessor = CartAccessor(engine)
    seen = []
    accessor.subscribe(lambda cart: seen.append(dump(accessor.cart)))

    accessor.add_product(1)
    accessor.add_product(2)

    assert dump(accessor.cart) == [line(1, 1), line(2, 1)]
    assert accessor.cart is engine.cart
    assert seen == [[line(1, 1)], [line(1, 1), line(2, 1)]]
