"""Outbound port: tell the outside world a purchase went through.

Services receive a notifier through their constructor instead of
sending mail or writing log files on their own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


class PurchaseNotifier(ABC):

    @abstractmethod
    def purchase_completed(self, product: Product, quantity: int, total: Money) -> None:
        """Called once per successful purchase, after the total is known."""
