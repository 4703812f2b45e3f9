"""Cart aggregate: the mutable side of a session.

A cart holds at most one line per product id and never more lines than its
capacity. It is created empty at session start and cleared after every
recorded checkout; it is never replaced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pos.domain.exceptions import CartFullError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)

MAX_CART_ITEMS = 10


@dataclass(frozen=True)
class CartItem:
    """A product + quantity pair inside a cart.

    Frozen: the cart swaps in a new line when quantities merge, so lines
    handed out by ``Cart.items`` cannot be used to change the cart.
    """

    product: Product
    quantity: Quantity

    @property
    def subtotal(self) -> Money:
        return self.product.price * self.quantity.value

    def with_added(self, quantity: Quantity) -> CartItem:
        return CartItem(product=self.product, quantity=self.quantity + quantity)


class Cart:
    """Aggregate root for the items a customer is about to buy.

    Invariants:
    - at most one ``CartItem`` per product id (adds are merged)
    - ``item_count`` never exceeds ``capacity``
    """

    def __init__(self, capacity: int = MAX_CART_ITEMS) -> None:
        if capacity <= 0:
            raise ValueError(f"Cart capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._items: list[CartItem] = []

    # --- Commands -------------------------------------------------------------

    def add_item(self, product: Product, quantity: int) -> None:
        """Add ``quantity`` units of ``product``.

        Lines are matched by product id only: when the id is already in the
        cart its quantity grows and the stored name/price are kept as they
        were.

        Raises InvalidQuantityError for a non-positive quantity and
        CartFullError when a new line would exceed capacity. The cart is
        unchanged in both cases.
        """
        qty = Quantity(quantity)

        index = self._index_of(product.id)
        if index is not None:
            merged = self._items[index].with_added(qty)
            self._items[index] = merged
            logger.debug(
                "Merged %d x product %d into cart (now %d)",
                qty.value, product.id, merged.quantity.value,
            )
            return

        if self.is_full:
            raise CartFullError(
                f"Cart is full ({self._capacity} distinct products maximum)"
            )

        self._items.append(CartItem(product=product, quantity=qty))
        logger.debug("Added %d x product %d to cart", qty.value, product.id)

    def clear(self) -> None:
        self._items = []

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_empty(self) -> bool:
        return len(self._items) == 0

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.subtotal
        return result

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: int) -> int | None:
        for i, item in enumerate(self._items):
            if item.product.id == product_id:
                return i
        return None
