"""Behavioral patterns: observer, strategy, chain of responsibility."""

from .observer import Observer, TemperatureDisplay, WeatherStation
from .strategy import BitcoinStrategy, CreditCardStrategy, PayPalStrategy, PaymentStrategy, ShoppingCart
from .chain_of_responsibility import (
    BaseLogger,
    DebugLogger,
    ErrorLogger,
    InfoLogger,
    LogEntry,
    Logger,
    LoggerChain,
    LogLevel,
)

__all__ = [
    "Observer",
    "WeatherStation",
    "TemperatureDisplay",
    "PaymentStrategy",
    "CreditCardStrategy",
    "PayPalStrategy",
    "BitcoinStrategy",
    "ShoppingCart",
    "LogLevel",
    "LogEntry",
    "Logger",
    "BaseLogger",
    "InfoLogger",
    "DebugLogger",
    "ErrorLogger",
    "LoggerChain",
]
