"""Application service: Add To Cart use case.

Resolves the product id against the catalog (the only place an unknown id
can be detected) and hands the product to the Cart aggregate, which
enforces quantity and capacity rules.
"""

from __future__ import annotations

from pos.application.dto import CartDTO, cart_to_dto
from pos.application.result import Result
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.cart import Cart
from pos.domain.repository.product_catalog import ProductCatalog


class AddToCartHandler:

    def __init__(self, cart: Cart, catalog: ProductCatalog) -> None:
        self._cart = cart
        self._catalog = catalog

    def handle(self, product_id: int, quantity: int) -> Result[CartDTO]:
        """Add ``quantity`` units of a catalog product to the cart.

        Fails with InvalidQuantityError, CartFullError or
        EntityNotFoundError; the cart is unchanged on every failure.
        """
        product = self._catalog.get_by_id(product_id)
        if product is None:
            return Result.failure(
                EntityNotFoundError(f"Product not found: #{product_id}")
            )

        try:
            self._cart.add_item(product, quantity)
        except ValidationError as exc:
            return Result.failure(exc)

        return Result.success(cart_to_dto(self._cart))
