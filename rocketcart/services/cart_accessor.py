# rocketcart/services/cart_accessor.py
from typing import Callable

from rocketcart.domain.schemas import Cart
from rocketcart.services.cart_engine import CartEngine, Listener


class CartAccessor:
    """Fasada odczytu/subskrypcji, wszystko delegowane 1:1 do CartEngine."""

    def __init__(self, engine: CartEngine):
        self._engine = engine

    @property
    def cart(self) -> Cart:
        return self._engine.cart

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self._engine.subscribe(listener)

    def add_product(self, product_id: int) -> None:
        self._engine.add_product(product_id)

    def remove_product(self, product_id: int) -> None:
        self._engine.remove_product(product_id)

    def update_product_amount(self, product_id: int, amount: int) -> None:
        self._engine.update_product_amount(product_id, amount)
