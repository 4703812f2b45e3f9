"""In-memory implementation of ProductCatalog, plus the built-in catalog."""

from __future__ import annotations

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_catalog import MAX_PRODUCTS, ProductCatalog

DEFAULT_PRODUCTS = [
    Product(id=1, name="Laptop", price=Money.of("999.99")),
    Product(id=2, name="Wireless Mouse", price=Money.of("25.50")),
    Product(id=3, name="Keyboard", price=Money.of("45.00")),
    Product(id=4, name="Monitor", price=Money.of("199.99")),
    Product(id=5, name="Headphones", price=Money.of("79.95")),
    Product(id=6, name="USB-C Cable", price=Money.of("9.99")),
]


class InMemoryProductCatalog(ProductCatalog):
    """A fixed catalog held in a dict keyed by product id.

    Insertion order is catalog order.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        if products is None:
            products = DEFAULT_PRODUCTS
        if len(products) > MAX_PRODUCTS:
            raise ValidationError(
                f"Catalog holds at most {MAX_PRODUCTS} products, got {len(products)}"
            )
        self._store: dict[int, Product] = {}
        for p in products:
            if p.id in self._store:
                raise ValidationError(f"Duplicate product id in catalog: #{p.id}")
            self._store[p.id] = p

    # --- ProductCatalog interface ---------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())
