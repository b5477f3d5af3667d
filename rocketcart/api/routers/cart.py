#rocketcart/api/routers/cart.py
from fastapi import APIRouter, Depends, Request

from rocketcart.domain.schemas import AddItemIn, AmountIn, CartOut
from rocketcart.services.cart_accessor import CartAccessor

router = APIRouter(prefix="/cart", tags=["cart"])

# odrzucenia (stock, brak produktu) nie sa bledami HTTP
# zwracamy aktualny koszyk, komunikat idzie przez NotificationService


def get_accessor(request: Request) -> CartAccessor:
    return request.app.state.cart


def _out(accessor: CartAccessor) -> dict:
    return {"items": list(accessor.cart)}


@router.get("/", response_model=CartOut)
def get_cart(accessor: CartAccessor = Depends(get_accessor)):
    return _out(accessor)


@router.post("/items", response_model=CartOut)
def add_item(payload: AddItemIn, accessor: CartAccessor = Depends(get_accessor)):
    accessor.add_product(payload.product_id)
    return _out(accessor)


@router.put("/items/{product_id}", response_model=CartOut)
def update_item_amount(
    product_id: int,
    payload: AmountIn,
    accessor: CartAccessor = Depends(get_accessor),
):
    accessor.update_product_amount(product_id, payload.amount)
    return _out(accessor)


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(product_id: int, accessor: CartAccessor = Depends(get_accessor)):
    accessor.remove_product(product_id)
    return _out(accessor)
