"""JSON-file-backed, read-only implementation of ProductCatalog.

The file is a JSON array of ``{"id": 1, "name": "...", "price": "9.99"}``
objects. It is read once, when the catalog is built.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.infrastructure.persistence.in_memory_product_catalog import (
    InMemoryProductCatalog,
)


class JsonProductCatalog(InMemoryProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        super().__init__(self._load())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ValidationError(f"Cannot read catalog {self._file_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Catalog {self._file_path} is not valid JSON: {exc}") from exc

        if not isinstance(raw, list):
            raise ValidationError(f"Catalog {self._file_path} must contain a JSON array")

        return [self._parse_entry(item) for item in raw]

    def _parse_entry(self, item: object) -> Product:
        if not isinstance(item, dict):
            raise ValidationError(f"Malformed product entry in {self._file_path}: {item!r}")

        product_id = item.get("id")
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise ValidationError(
                f"Product id must be an integer in {self._file_path}, got {product_id!r}"
            )

        # Prices are single-currency.
        currency = item.get("currency", "USD")
        if currency != "USD":
            raise ValidationError(
                f"Product #{product_id} in {self._file_path} is priced in {currency!r}; "
                f"only USD is accepted"
            )

        try:
            return Product(
                id=product_id,
                name=str(item["name"]),
                price=Money(Decimal(str(item["price"]))),
            )
        except (KeyError, InvalidOperation) as exc:
            raise ValidationError(
                f"Malformed product entry in {self._file_path}: {exc!r}"
            ) from exc
