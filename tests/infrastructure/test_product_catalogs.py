"""Tests for the in-memory and JSON product catalogs."""

import json

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_catalog import MAX_PRODUCTS
from pos.infrastructure.persistence.in_memory_product_catalog import (
    DEFAULT_PRODUCTS,
    InMemoryProductCatalog,
)
from pos.infrastructure.persistence.json_product_catalog import JsonProductCatalog


class TestInMemoryProductCatalog:

    def test_defaults(self):
        catalog = InMemoryProductCatalog()
        assert catalog.list_all() == DEFAULT_PRODUCTS
        assert catalog.get_by_id(1).name == "Laptop"
        assert catalog.get_by_id(999) is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate product id"):
            InMemoryProductCatalog([
                Product(1, "A", Money.of("1")),
                Product(1, "B", Money.of("2")),
            ])

    def test_capacity_enforced(self):
        products = [Product(i, f"P{i}", Money.of("1")) for i in range(MAX_PRODUCTS + 1)]
        with pytest.raises(ValidationError, match="at most"):
            InMemoryProductCatalog(products)


class TestJsonProductCatalog:

    def test_loads_products_in_file_order(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([
            {"id": 7, "name": "Tea", "price": "3.25"},
            {"id": 2, "name": "Scone", "price": 4},
        ]), encoding="utf-8")

        catalog = JsonProductCatalog(path)

        assert [p.id for p in catalog.list_all()] == [7, 2]
        assert catalog.get_by_id(7).price == Money.of("3.25")
        assert catalog.get_by_id(2).price == Money.of("4")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValidationError, match="Cannot read catalog"):
            JsonProductCatalog(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{nope", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            JsonProductCatalog(path)

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(ValidationError, match="JSON array"):
            JsonProductCatalog(path)

    def test_malformed_entry(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('[{"id": 1, "name": "A"}]', encoding="utf-8")
        with pytest.raises(ValidationError, match="Malformed product entry"):
            JsonProductCatalog(path)

    def test_negative_price_rejected(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('[{"id": 1, "name": "A", "price": "-1"}]', encoding="utf-8")
        with pytest.raises(ValidationError, match="cannot be negative"):
            JsonProductCatalog(path)

    def test_explicit_usd_accepted(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            '[{"id": 1, "name": "Tea", "price": "3.00", "currency": "USD"}]',
            encoding="utf-8",
        )
        assert JsonProductCatalog(path).get_by_id(1).price == Money.of("3.00")

    def test_foreign_currency_rejected_at_load(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            '[{"id": 1, "name": "Tea", "price": "3.00", "currency": "EUR"}]',
            encoding="utf-8",
        )
        with pytest.raises(ValidationError, match="only USD is accepted"):
            JsonProductCatalog(path)

    @pytest.mark.parametrize("raw_id", ["1.9", "true", '"1"', "null"])
    def test_non_integer_id_rejected(self, tmp_path, raw_id):
        path = tmp_path / "catalog.json"
        path.write_text(
            f'[{{"id": {raw_id}, "name": "Tea", "price": "3.00"}}]',
            encoding="utf-8",
        )
        with pytest.raises(ValidationError, match="Product id must be an integer"):
            JsonProductCatalog(path)

    def test_entry_must_be_an_object(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('[["id", 1]]', encoding="utf-8")
        with pytest.raises(ValidationError, match="Malformed product entry"):
            JsonProductCatalog(path)
