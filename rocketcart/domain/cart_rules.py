# rocketcart/domain/cart_rules.py
"""
Pure planning of cart mutations.

Each planner takes the committed cart plus whatever the stock service already
answered and returns ``(outcome, next_cart)``. ``next_cart`` is only set for
``MutationOutcome.COMMITTED``. Business-rule rejections are outcomes, not
exceptions; only the collaborators passed in (``load_product``) may raise.
"""
from enum import Enum
from typing import Callable, NamedTuple, Optional

from rocketcart.domain.schemas import Cart, CartLine, Product


class MutationOutcome(str, Enum):
    COMMITTED = "committed"
    IGNORED = "ignored"
    REJECTED_STOCK = "rejected_stock"
    REJECTED_NOT_FOUND = "rejected_not_found"
    INFRASTRUCTURE_FAILURE = "infrastructure_failure"


class Plan(NamedTuple):
    outcome: MutationOutcome
    cart: Optional[Cart] = None


def find_line(cart: Cart, product_id: int) -> int:
    """Index linii dla produktu albo -1."""
    for index, line in enumerate(cart):
        if line.id == product_id:
            return index
    return -1


def _replace_at(cart: Cart, index: int, line: CartLine) -> Cart:
    return cart[:index] + (line,) + cart[index + 1:]


def plan_add(
    cart: Cart,
    product_id: int,
    available: int,
    load_product: Callable[[int], Product],
) -> Plan:
    index = find_line(cart, product_id)
    current = cart[index].amount if index >= 0 else 0
    desired = current + 1

    if desired > available:
        return Plan(MutationOutcome.REJECTED_STOCK)

    if index >= 0:
        line = cart[index].model_copy(update={"amount": desired})
        return Plan(MutationOutcome.COMMITTED, _replace_at(cart, index, line))

    # nowa linia na koncu, metadane tylko przy pierwszym dodaniu
    product = load_product(product_id)
    return Plan(MutationOutcome.COMMITTED, cart + (CartLine.from_product(product),))


def plan_remove(cart: Cart, product_id: int) -> Plan:
    index = find_line(cart, product_id)
    if index < 0:
        return Plan(MutationOutcome.REJECTED_NOT_FOUND)
    return Plan(MutationOutcome.COMMITTED, cart[:index] + cart[index + 1:])


def plan_set_amount(cart: Cart, product_id: int, amount: int, available: int) -> Plan:
    if amount <= 0:
        return Plan(MutationOutcome.IGNORED)

    if amount > available:
        return Plan(MutationOutcome.REJECTED_STOCK)

    index = find_line(cart, product_id)
    if index < 0:
        return Plan(MutationOutcome.REJECTED_NOT_FOUND)

    line = cart[index].model_copy(update={"amount": amount})
    return Plan(MutationOutcome.COMMITTED, _replace_at(cart, index, line))
