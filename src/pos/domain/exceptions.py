"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application layer can turn them into ``Result`` values and the CLI
can display them uniformly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pos.domain.model.order import Order


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidQuantityError(ValidationError):
    """A non-positive (or non-integer) quantity was requested."""


class CartFullError(ValidationError):
    """The cart is at capacity and the product is not already in it."""


class OrderHistoryFullError(DomainException):
    """The order history is at capacity.

    The order was still built (and paid for), so it travels with the
    exception instead of being lost.
    """

    def __init__(self, message: str, order: Order) -> None:
        super().__init__(message)
        self.order = order


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
