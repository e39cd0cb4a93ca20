"""
Strategy: a family of interchangeable algorithms behind one contract; the
context can switch between them at runtime.
"""

from abc import ABC, abstractmethod

from .._runes import rune_text


class PaymentStrategy(ABC):
    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable name for the payment channel."""

    def pay(self, amount: float) -> str:
        # NOTE: the amount is rendered as a single character, not decimal text.
        # Probably unintended; kept so output stays comparable.
        return "Paid " + rune_text(int(amount)) + " using " + self.display_name


class CreditCardStrategy(PaymentStrategy):
    def __init__(self, card_number: str, cvv: str):
        self.card_number = card_number
        self.cvv = cvv

    @property
    def display_name(self) -> str:
        return "Credit Card"


class PayPalStrategy(PaymentStrategy):
    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    @property
    def display_name(self) -> str:
        return "PayPal"


class BitcoinStrategy(PaymentStrategy):
    def __init__(self, address: str):
        self.address = address

    @property
    def display_name(self) -> str:
        return "Bitcoin"


class ShoppingCart:
    def __init__(self, strategy: PaymentStrategy):
        self._payment_strategy = strategy

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self._payment_strategy = strategy

    def checkout(self, amount: float) -> str:
        return self._payment_strategy.pay(amount)


def main():
    cart = ShoppingCart(CreditCardStrategy("1234", "123"))
    print(cart.checkout(100.0))

    cart.set_payment_strategy(PayPalStrategy("test@test.com", "password"))
    print(cart.checkout(50.0))

    cart.set_payment_strategy(BitcoinStrategy("1BoatSLRHtKNngkdXEeobR76b53LETtpyT"))
    print(cart.checkout(75.0))


if __name__ == "__main__":
    main()
