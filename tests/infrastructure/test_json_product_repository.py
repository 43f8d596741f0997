"""Tests for the JSON-file-backed product repository."""

import json
from decimal import Decimal

import pytest

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product, ProductStatus
from shop.domain.model.value_objects import Money
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def products_file(tmp_path):
    return tmp_path / "data" / "products.json"


class TestJsonProductRepository:

    def test_creates_empty_file(self, products_file):
        JsonProductRepository(products_file)
        assert json.loads(products_file.read_text(encoding="utf-8")) == []

    def test_missing_product_returns_none(self, products_file):
        assert JsonProductRepository(products_file).find_by_id(1) is None

    def test_save_then_find(self, products_file):
        repo = JsonProductRepository(products_file)
        repo.save(Product(id=1, name="Laptop", price=Money.of("999.99"), stock=10))

        loaded = JsonProductRepository(products_file).find_by_id(1)
        assert loaded.name == "Laptop"
        assert loaded.price == Money(Decimal("999.99"))
        assert loaded.stock == 10
        assert loaded.is_active()

    def test_status_survives_reload(self, products_file):
        repo = JsonProductRepository(products_file)
        repo.save(Product(
            id=7, name="Old Phone", price=Money.of("50"), stock=0,
            status=ProductStatus.INACTIVE,
        ))
        assert not repo.find_by_id(7).is_active()

    def test_save_overwrites_existing(self, products_file):
        repo = JsonProductRepository(products_file)
        product = Product(id=1, name="Laptop", price=Money.of("999.99"), stock=10)
        repo.save(product)
        product.stock = 3
        repo.save(product)

        assert len(repo.list_all()) == 1
        assert repo.find_by_id(1).stock == 3

    def test_file_format(self, products_file):
        repo = JsonProductRepository(products_file)
        repo.save(Product(id=2, name="Mouse", price=Money.of("25.50"), stock=4))
        repo.save(Product(id=1, name="Laptop", price=Money.of("999.99"), stock=10))

        raw = json.loads(products_file.read_text(encoding="utf-8"))
        assert [item["id"] for item in raw] == [1, 2]
        assert raw[1] == {
            "id": 2,
            "name": "Mouse",
            "price": "25.50",
            "currency": "USD",
            "stock": 4,
            "status": "active",
        }

    def test_invalid_stored_product_rejected_on_load(self, products_file):
        products_file.parent.mkdir(parents=True)
        products_file.write_text(
            json.dumps([{"id": 1, "name": "Broken", "price": "-5", "stock": 1}]),
            encoding="utf-8",
        )
        with pytest.raises(ValidationError, match="Price must be positive"):
            JsonProductRepository(products_file).list_all()
