"""Application service: Update Product use case."""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        price: str | None = None,
        stock: int | None = None,
    ) -> Product:
        """Change a product's price and/or stock.

        Both values go through the Product's validating setters, so a
        rejected value leaves the product unchanged.
        """
        if price is None and stock is None:
            raise ValidationError("Nothing to update")

        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")

        new_price = Money.of(price, product.price.currency) if price is not None else product.price
        new_stock = stock if stock is not None else product.stock

        # Validate both values before touching the product
        Product(product.id, product.name, new_price, new_stock, product.status)

        product.price = new_price
        product.stock = new_stock
        self._product_repo.save(product)
        return product
