"""Application service: Checkout use case.

Wraps the checkout domain service so a full order history comes back as a
failed Result that still carries the paid order.

An empty cart is not an error here: it checks out as a $0.00 order with
no lines. Drivers that want to forbid that must check ``is_empty`` first.
"""

from __future__ import annotations

from pos.application.dto import OrderDTO, order_to_dto
from pos.application.result import Result
from pos.domain.exceptions import OrderHistoryFullError
from pos.domain.model.cart import Cart
from pos.domain.model.payment import PaymentMethod
from pos.domain.service.checkout_service import CheckoutService


class CheckoutHandler:

    def __init__(self, cart: Cart, checkout_service: CheckoutService) -> None:
        self._cart = cart
        self._checkout_service = checkout_service

    def handle(self, payment_method: PaymentMethod) -> Result[OrderDTO]:
        try:
            order = self._checkout_service.checkout(self._cart, payment_method)
        except OrderHistoryFullError as exc:
            return Result.failure(exc, value=order_to_dto(exc.order))
        return Result.success(order_to_dto(order))
