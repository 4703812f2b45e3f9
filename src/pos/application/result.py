"""Typed outcome of a use case.

Expected business conditions (bad quantity, full cart, unknown product,
full history) come back as a ``Result`` instead of an exception so the
driver can decide how to present them. A failed Result may still carry a
value: a checkout refused by a full history returns the paid order too.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pos.domain.exceptions import DomainException

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):

    value: T | None = None
    error: DomainException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def failure(error: DomainException, value: T | None = None) -> Result[T]:
        return Result(value=value, error=error)
