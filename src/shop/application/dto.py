"""Data Transfer Objects: plain containers returned to the CLI layer.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    id: int
    name: str
    price: str  # formatted, e.g. "$15.00"
    stock: int
    status: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            stock=product.stock,
            status=product.status.value,
        )
