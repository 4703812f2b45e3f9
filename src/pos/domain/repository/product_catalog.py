"""Abstract catalog of purchasable products.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON file)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product

MAX_PRODUCTS = 10


class ProductCatalog(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in catalog order."""
