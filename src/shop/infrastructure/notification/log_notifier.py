"""PurchaseNotifier that reports completed purchases through logging."""

from __future__ import annotations

import logging

from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.service.purchase_notifier import PurchaseNotifier

LOGGER = logging.getLogger(__name__)


class LoggingPurchaseNotifier(PurchaseNotifier):

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or LOGGER

    def purchase_completed(self, product: Product, quantity: int, total: Money) -> None:
        self._logger.info(
            "Purchase completed: product=#%s name=%s quantity=%s total=%s",
            product.id,
            product.name,
            quantity,
            total,
        )
