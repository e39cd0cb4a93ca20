"""Creational patterns: singleton, factory, builder."""

from .singleton import Counter, CounterProvider, RequestHandler
from .factory import CreditCard, DebitCard, PayPal, PaymentMethod, PaymentType, payment_factory
from .builder import Computer, ComputerBuilder, ConcreteComputerBuilder, Director

__all__ = [
    "Counter",
    "CounterProvider",
    "RequestHandler",
    "PaymentMethod",
    "CreditCard",
    "DebitCard",
    "PayPal",
    "PaymentType",
    "payment_factory",
    "Computer",
    "ComputerBuilder",
    "ConcreteComputerBuilder",
    "Director",
]
