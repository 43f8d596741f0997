"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shop.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Sign is left to the caller:
    a product price must be positive, but that is the Product's rule.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}",
                argument="amount",
            )
        if not self.amount.is_finite():
            raise ValidationError(
                f"Money amount must be finite, got {self.amount}", argument="amount"
            )

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        if self.currency == "USD":
            return f"${self.amount:.2f}"
        return f"{self.amount:.2f} {self.currency}"

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(
                f"Invalid money amount: {amount!r}", argument="amount"
            ) from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot buy zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}",
                argument="quantity",
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive", argument="quantity")

    def __str__(self) -> str:
        return str(self.value)
