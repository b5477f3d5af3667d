# rocketcart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Tuple


class Product(BaseModel):
    """Produkt z serwisu stock. Metadane (title, price, image...) sa nieprzezroczyste."""

    id: int

    model_config = ConfigDict(extra="allow", frozen=True)


class CartLine(Product):
    """Produkt w koszyku razem z iloscia."""

    amount: int = Field(..., ge=1, description="Ilosc w koszyku (>= 1)")

    @classmethod
    def from_product(cls, product: Product, amount: int = 1) -> "CartLine":
        return cls.model_validate({**product.model_dump(), "amount": amount})


class Stock(BaseModel):
    """Dostepna ilosc produktu."""

    amount: int

    model_config = ConfigDict(extra="ignore")


Cart = Tuple[CartLine, ...]


class AddItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    # dowolne id, o istnieniu decyduje serwis stock
    product_id: int = Field(..., description="ID produktu")


class AmountIn(BaseModel):
    """Schema dla zmiany ilosci. Ilosc <= 0 jest ignorowana przez silnik koszyka."""

    amount: int


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    items: List[CartLine]
