"""In-memory fakes for testing.

These implement the same abstract interfaces as the infrastructure
adapters but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.purchase_notifier import PurchaseNotifier


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[int, Product] = {}
        for p in products or []:
            self._store[p.id] = p
        self.saved: list[Product] = []

    def find_by_id(self, product_id: int) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product
        self.saved.append(product)


class FakePurchaseNotifier(PurchaseNotifier):

    def __init__(self) -> None:
        self.purchases: list[tuple[int, int, Money]] = []

    def purchase_completed(self, product: Product, quantity: int, total: Money) -> None:
        self.purchases.append((product.id, quantity, total))
