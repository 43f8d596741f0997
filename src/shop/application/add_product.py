"""Application service: Add Product use case."""

from __future__ import annotations

from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, stock: int) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required", argument="name")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        next_id = max((p.id for p in all_products), default=0) + 1

        product = Product(id=next_id, name=name.strip(), price=Money.of(price), stock=stock)
        self._product_repo.save(product)
        return product
