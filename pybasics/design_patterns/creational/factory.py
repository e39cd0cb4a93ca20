"""
Factory: create objects behind a common contract, chosen by a type tag.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Type


class PaymentMethod(ABC):
    """Contract for every payment method the factory can build."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable payment method name."""

    def pay(self, amount: float) -> str:
        return f"Paid using {self.display_name}"


class CreditCard(PaymentMethod):
    @property
    def display_name(self) -> str:
        return "Credit Card"


class DebitCard(PaymentMethod):
    @property
    def display_name(self) -> str:
        return "Debit Card"


class PayPal(PaymentMethod):
    @property
    def display_name(self) -> str:
        return "PayPal"


class PaymentType(Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    PAYPAL = "paypal"


def _build_payment_map() -> Dict[PaymentType, Type[PaymentMethod]]:
    return {
        PaymentType.CREDIT_CARD: CreditCard,
        PaymentType.DEBIT_CARD: DebitCard,
        PaymentType.PAYPAL: PayPal,
    }


def payment_factory(payment_type: PaymentType) -> PaymentMethod:
    payment_cls = _build_payment_map().get(payment_type)
    if payment_cls is None:
        raise ValueError(f"Payment type '{payment_type}' not supported.")
    return payment_cls()


def main():
    credit_card = payment_factory(PaymentType.CREDIT_CARD)
    paypal = payment_factory(PaymentType.PAYPAL)

    print(credit_card.pay(100.0))
    print(paypal.pay(50.0))

    try:
        payment_factory("cash")
    except ValueError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
