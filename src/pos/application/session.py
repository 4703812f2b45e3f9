"""One shopping session: the surface a driver (CLI, tests) talks to.

A session owns one cart and one order history and shares the process-wide
audit trail and order id sequence it is given.
"""

from __future__ import annotations

from pos.application.add_to_cart import AddToCartHandler
from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartDTO, OrderDTO, ProductDTO
from pos.application.list_orders import ListOrdersHandler
from pos.application.list_products import ListProductsHandler
from pos.application.result import Result
from pos.application.view_cart import ViewCartHandler
from pos.domain.model.cart import MAX_CART_ITEMS, Cart
from pos.domain.model.order import MAX_ORDERS, OrderHistory, OrderIdSequence
from pos.domain.model.payment import Emit, PaymentMethod
from pos.domain.repository.audit_trail import AuditTrail
from pos.domain.repository.product_catalog import ProductCatalog
from pos.domain.service.checkout_service import CheckoutService


class PosSession:

    def __init__(
        self,
        catalog: ProductCatalog,
        audit_trail: AuditTrail,
        emit: Emit,
        id_sequence: OrderIdSequence | None = None,
        cart_capacity: int = MAX_CART_ITEMS,
        history_capacity: int = MAX_ORDERS,
    ) -> None:
        self.cart = Cart(capacity=cart_capacity)
        self.history = OrderHistory(capacity=history_capacity)
        self._audit_trail = audit_trail

        checkout_service = CheckoutService(
            history=self.history,
            audit_trail=audit_trail,
            id_sequence=id_sequence or OrderIdSequence(),
            emit=emit,
        )

        self._list_products = ListProductsHandler(catalog)
        self._add_to_cart = AddToCartHandler(self.cart, catalog)
        self._view_cart = ViewCartHandler(self.cart)
        self._checkout = CheckoutHandler(self.cart, checkout_service)
        self._list_orders = ListOrdersHandler(self.history)

    def list_products(self) -> list[ProductDTO]:
        return self._list_products.handle()

    def add_to_cart(self, product_id: int, quantity: int) -> Result[CartDTO]:
        return self._add_to_cart.handle(product_id, quantity)

    def view_cart(self) -> CartDTO:
        return self._view_cart.handle()

    def checkout(self, payment_method: PaymentMethod) -> Result[OrderDTO]:
        return self._checkout.handle(payment_method)

    def list_orders(self) -> list[OrderDTO]:
        return self._list_orders.handle()

    def close(self) -> None:
        """Release the audit trail. Later checkouts are no longer audited."""
        self._audit_trail.close()

    def __enter__(self) -> PosSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
