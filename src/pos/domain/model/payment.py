"""Payment methods accepted at checkout.

The set is closed: cash, card and a digital wallet. Paying never fails here;
the amount is always a cart total and therefore non-negative.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money

Emit = Callable[[str], None]


class PaymentMethod(Enum):
    CASH = "Cash"
    CARD = "Credit / Debit Card"
    DIGITAL_WALLET = "GCash"

    @property
    def label(self) -> str:
        return self.value

    def confirmation(self, amount: Money) -> str:
        return f"Paid ${amount.amount:.2f} using {self.label}."

    def pay(self, amount: Money, emit: Emit) -> None:
        """Take the payment, reporting the confirmation through ``emit``."""
        emit(self.confirmation(amount))

    @staticmethod
    def from_choice(choice: str) -> PaymentMethod:
        """Resolve a menu key such as ``"1"`` or ``"cash"``."""
        key = choice.strip().lower()
        try:
            return _CHOICES[key]
        except KeyError:
            raise ValidationError(f"Unknown payment method: {choice!r}") from None


_CHOICES: dict[str, PaymentMethod] = {
    "1": PaymentMethod.CASH,
    "cash": PaymentMethod.CASH,
    "2": PaymentMethod.CARD,
    "card": PaymentMethod.CARD,
    "3": PaymentMethod.DIGITAL_WALLET,
    "gcash": PaymentMethod.DIGITAL_WALLET,
    "wallet": PaymentMethod.DIGITAL_WALLET,
}
