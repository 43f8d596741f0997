"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shop.domain.model.product import Product, ProductStatus
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find_by_id(self, product_id: int) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            int(item["id"]): Product(
                id=int(item["id"]),
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
                stock=int(item["stock"]),
                status=ProductStatus(item.get("status", ProductStatus.ACTIVE.value)),
            )
            for item in raw
        }

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "stock": p.stock,
                "status": p.status.value,
            }
            for p in sorted(products.values(), key=lambda p: p.id)
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
