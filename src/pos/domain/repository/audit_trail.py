"""Abstract append-only record of completed checkouts."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuditTrail(ABC):

    @abstractmethod
    def log(self, order_id: int, payment_label: str) -> None:
        """Append one checkout fact. Must never raise."""

    @abstractmethod
    def close(self) -> None:
        """Release the backing resource. Safe to call more than once."""
