"""Domain service: turns a cart into a paid, recorded order.

Coordinates the Cart, the chosen PaymentMethod, the OrderHistory and the
audit trail. Neither aggregate knows about the other; this is the only
place the checkout steps are sequenced.
"""

from __future__ import annotations

import logging

from pos.domain.exceptions import OrderHistoryFullError
from pos.domain.model.cart import Cart
from pos.domain.model.order import Order, OrderHistory, OrderIdSequence
from pos.domain.model.payment import Emit, PaymentMethod
from pos.domain.repository.audit_trail import AuditTrail

logger = logging.getLogger(__name__)


class CheckoutService:

    def __init__(
        self,
        history: OrderHistory,
        audit_trail: AuditTrail,
        id_sequence: OrderIdSequence,
        emit: Emit,
    ) -> None:
        self._history = history
        self._audit_trail = audit_trail
        self._id_sequence = id_sequence
        self._emit = emit

    def checkout(self, cart: Cart, payment_method: PaymentMethod) -> Order:
        """Pay for the cart and record the resulting order.

        Steps:
        1. Take payment for the cart total (an empty cart pays $0.00).
        2. Snapshot the cart into a new Order with the next id.
        3. Record the order, write the audit line, clear the cart.

        Raises OrderHistoryFullError (carrying the order) when the history
        has no room. Payment has already been taken at that point; the order
        is not recorded, nothing is audited and the cart is left as it was.
        """
        total = cart.total
        payment_method.pay(total, self._emit)

        order = Order.from_cart(self._id_sequence.next_id(), cart, payment_method)

        try:
            self._history.record(order)
        except OrderHistoryFullError:
            logger.warning(
                "Order #%d paid with %s but not recorded: history is full",
                order.id, order.payment_method_label,
            )
            raise

        self._audit_trail.log(order.id, order.payment_method_label)
        cart.clear()

        logger.info(
            "Order #%d checked out: %d line(s), total %s, paid with %s",
            order.id, order.item_count, order.total, order.payment_method_label,
        )
        return order
