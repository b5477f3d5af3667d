# rocketcart/domain/snapshot.py
from typing import List

from pydantic import TypeAdapter

from rocketcart.domain.schemas import Cart, CartLine

_LINES = TypeAdapter(List[CartLine])


def dumps(cart: Cart) -> str:
    """Cala zawartosc koszyka jako JSON (lista linii)."""
    return _LINES.dump_json(list(cart)).decode("utf-8")


def loads(blob: str) -> Cart:
    """
    Odtwarza koszyk z JSONa.
    Rzuca ValueError (w tym pydantic ValidationError) dla uszkodzonych danych.
    """
    lines = _LINES.validate_json(blob)

    seen = set()
    for line in lines:
        if line.id in seen:
            raise ValueError(f"Duplikat produktu {line.id} w snapshot")
        seen.add(line.id)

    return tuple(lines)
