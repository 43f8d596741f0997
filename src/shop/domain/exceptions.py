"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument violated a business invariant.

    ``argument`` names the offending input (``"price"``, ``"stock"``,
    ``"quantity"``...) when there is a single one to blame.
    """

    def __init__(self, message: str, argument: str | None = None) -> None:
        super().__init__(message)
        self.argument = argument


class OutOfStockError(DomainException):
    """A total was requested for a product with no stock left."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotActiveError(DomainException):
    """The product exists but is not available for purchase."""
