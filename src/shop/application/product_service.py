"""Application service: Purchase Product use case.

Looks the product up through the repository port, checks that it can
be sold, and lets the Product aggregate compute the total.
"""

from __future__ import annotations

import logging

from shop.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ProductNotActiveError,
)
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.purchase_notifier import PurchaseNotifier

LOGGER = logging.getLogger(__name__)


class ProductService:

    def __init__(
        self,
        repository: ProductRepository,
        notifier: PurchaseNotifier | None = None,
    ) -> None:
        self._repository = repository
        self._notifier = notifier

    def purchase_product(self, product_id: int, quantity: int) -> Money:
        """Compute what buying ``quantity`` units of a product costs.

        Guards run in a fixed order: existence, then status, then the
        product's own stock and quantity checks. Stock is not decremented
        and nothing is saved; reserving stock is a separate concern the
        catalog does not model yet.
        """
        LOGGER.debug("Purchase requested: product=%s quantity=%s", product_id, quantity)

        product = self._repository.find_by_id(product_id)
        if product is None:
            LOGGER.info("Purchase rejected: product #%s not found", product_id)
            raise EntityNotFoundError(f"Product #{product_id} not found")

        if not product.is_active():
            LOGGER.info("Purchase rejected: product #%s is not active", product_id)
            raise ProductNotActiveError(f"Product #{product_id} is not active")

        try:
            total = product.calculate_total_price(quantity)
        except DomainException as exc:
            LOGGER.info("Purchase rejected for product #%s: %s", product_id, exc)
            raise

        if self._notifier is not None:
            self._notifier.purchase_completed(product, quantity, total)

        return total
