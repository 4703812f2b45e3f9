"""Order snapshots and the session's order history.

An Order is a point-in-time copy of a cart, taken at checkout. Nothing that
happens to the cart afterwards can reach it.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone

from pos.domain.exceptions import OrderHistoryFullError
from pos.domain.model.cart import Cart
from pos.domain.model.payment import PaymentMethod
from pos.domain.model.value_objects import Money, Quantity

MAX_ORDERS = 10


@dataclass(frozen=True)
class OrderLineItem:
    """Captures product name, price and quantity at checkout time."""

    product_id: int
    product_name: str
    unit_price: Money  # locked at checkout
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Immutable record of one checkout.

    Build new orders with ``Order.from_cart()``; the plain constructor is
    kept simple for tests and reconstitution.
    """

    id: int
    line_items: tuple[OrderLineItem, ...]
    payment_method_label: str
    total: Money
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def from_cart(order_id: int, cart: Cart, payment_method: PaymentMethod) -> Order:
        """Snapshot the cart's current contents into a new order."""
        line_items = tuple(
            OrderLineItem(
                product_id=item.product.id,
                product_name=item.product.name,
                unit_price=item.product.price,
                quantity=item.quantity,
            )
            for item in cart.items
        )
        return Order(
            id=order_id,
            line_items=line_items,
            payment_method_label=payment_method.label,
            total=cart.total,
        )

    @property
    def item_count(self) -> int:
        return len(self.line_items)


class OrderIdSequence:
    """Hands out order ids: 1, 2, 3, ...

    An id is consumed by every order built, recorded or not, and is never
    handed out twice.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class OrderHistory:
    """Append-only list of recorded orders with a hard capacity.

    There is no eviction: once full, further orders are refused.
    """

    def __init__(self, capacity: int = MAX_ORDERS) -> None:
        if capacity <= 0:
            raise ValueError(f"Order history capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._orders: list[Order] = []

    def record(self, order: Order) -> None:
        if self.is_full:
            raise OrderHistoryFullError(
                f"Order history is full ({self._capacity} orders maximum); "
                f"order #{order.id} was not recorded",
                order=order,
            )
        self._orders.append(order)

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._orders) >= self._capacity

    def __len__(self) -> int:
        return len(self._orders)
