"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.cart import Cart
from pos.domain.model.order import Order
from pos.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class CartLineDTO:

    product_id: int
    product_name: str
    unit_price: str
    quantity: int
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Output: a snapshot of the cart for display."""

    items: list[CartLineDTO]
    total: str
    capacity: int

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class OrderLineDTO:

    product_id: int
    product_name: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a completed order as displayed to the user."""

    id: int
    payment_method: str
    items: list[OrderLineDTO]
    total: str
    placed_at: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(id=product.id, name=product.name, price=str(product.price))


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=item.product.id,
                product_name=item.product.name,
                unit_price=str(item.product.price),
                quantity=item.quantity.value,
                subtotal=str(item.subtotal),
            )
            for item in cart.items
        ],
        total=str(cart.total),
        capacity=cart.capacity,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        payment_method=order.payment_method_label,
        items=[
            OrderLineDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                unit_price=str(item.unit_price),
                quantity=item.quantity.value,
                line_total=str(item.line_total),
            )
            for item in order.line_items
        ],
        total=str(order.total),
        placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
