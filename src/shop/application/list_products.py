"""Application service: List Products use case (query)."""

from __future__ import annotations

from shop.application.dto import ProductDTO
from shop.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        products = sorted(self._product_repo.list_all(), key=lambda p: p.id)
        return [ProductDTO.from_product(p) for p in products]
