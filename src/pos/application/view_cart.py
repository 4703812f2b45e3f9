"""Application service: View Cart use case (query)."""

from __future__ import annotations

from pos.application.dto import CartDTO, cart_to_dto
from pos.domain.model.cart import Cart


class ViewCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return cart_to_dto(self._cart)
