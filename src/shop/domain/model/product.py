"""Product aggregate.

A product is the only thing a customer can buy. Its price and stock can
change over time, but only through setters that re-check the same
invariants as construction, so an invalid Product can never exist.
"""

from __future__ import annotations

from enum import Enum

from shop.domain.exceptions import OutOfStockError, ValidationError
from shop.domain.model.value_objects import Money, Quantity


class ProductStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Product:
    """A sellable item in the catalog.

    Invariants:
    - ``price`` is strictly positive
    - ``stock`` is a non-negative integer

    ``status`` is accepted by the constructor only so that repositories
    can reconstitute stored products; nothing in the model toggles it.
    """

    def __init__(
        self,
        id: int,
        name: str,
        price: Money,
        stock: int,
        status: ProductStatus = ProductStatus.ACTIVE,
    ) -> None:
        self._id = id
        self._name = name
        self.price = price
        self.stock = stock
        self._status = status

    # --- Read-only identity ---------------------------------------------------

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def status(self) -> ProductStatus:
        return self._status

    # --- Validated state ------------------------------------------------------

    @property
    def price(self) -> Money:
        return self._price

    @price.setter
    def price(self, value: Money) -> None:
        if not isinstance(value, Money):
            raise ValidationError(
                f"Price must be Money, got {type(value).__name__}",
                argument="price",
            )
        if value.amount <= 0:
            raise ValidationError("Price must be positive", argument="price")
        self._price = value

    @property
    def stock(self) -> int:
        return self._stock

    @stock.setter
    def stock(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(value).__name__}",
                argument="stock",
            )
        if value < 0:
            raise ValidationError("Stock cannot be negative", argument="stock")
        self._stock = value

    # --- Queries --------------------------------------------------------------

    def is_active(self) -> bool:
        return self._status is ProductStatus.ACTIVE

    def has_stock(self) -> bool:
        return self._stock > 0

    def calculate_total_price(self, quantity: int) -> Money:
        """Return ``price * quantity``.

        The stock check runs before the quantity check: a product with
        no stock reports OutOfStockError even for a nonsensical quantity.
        Stock is left untouched.
        """
        if not self.has_stock():
            raise OutOfStockError("Product out of stock")

        return self._price * Quantity(quantity).value

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, name={self._name!r}, price={self._price}, "
            f"stock={self._stock}, status={self._status.value})"
        )
