"""
Chain of Responsibility: pass a request along a linked sequence of handlers
until one of them handles it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class LogLevel(IntEnum):
    INFO = 0
    DEBUG = 1
    ERROR = 2


@dataclass
class LogEntry:
    message: str
    level: LogLevel


class Logger(ABC):
    """Contract for every handler in the chain."""

    @abstractmethod
    def set_next(self, logger: Logger) -> Logger:
        """Link the handler that receives entries this one does not handle."""

    @abstractmethod
    def log(self, entry: LogEntry) -> str:
        """Handle or forward ``entry``; return the formatted line or ``""``."""


class BaseLogger(Logger):
    # Base class for the handling flow shared by all loggers.
    # Handle the entry when the level matches, otherwise forward it.
    # Subclasses only say which level they own and how they prefix it.

    level: LogLevel
    prefix: str

    def __init__(self):
        self._next: Optional[Logger] = None

    def set_next(self, logger: Logger) -> Logger:
        self._next = logger
        # Returning the next handler lets chains be wired in one expression
        return logger

    def log(self, entry: LogEntry) -> str:
        if self.can_handle(entry):
            return self.format(entry)
        if self._next is not None:
            return self._next.log(entry)
        # End of chain
        return ""

    def can_handle(self, entry: LogEntry) -> bool:
        return entry.level == self.level

    def format(self, entry: LogEntry) -> str:
        return self.prefix + entry.message


class InfoLogger(BaseLogger):
    level = LogLevel.INFO
    prefix = "Info: "


class DebugLogger(BaseLogger):
    level = LogLevel.DEBUG
    prefix = "Debug: "


class ErrorLogger(BaseLogger):
    level = LogLevel.ERROR
    prefix = "Error: "


class LoggerChain:
    def __init__(self):
        self._first_logger = InfoLogger()
        self._first_logger.set_next(DebugLogger()).set_next(ErrorLogger())

    def log(self, entry: LogEntry) -> str:
        return self._first_logger.log(entry)


def main():
    logger_chain = LoggerChain()

    print(logger_chain.log(LogEntry("This is an information.", LogLevel.INFO)))
    print(logger_chain.log(LogEntry("This is a debug information.", LogLevel.DEBUG)))
    print(logger_chain.log(LogEntry("This is an error information.", LogLevel.ERROR)))


if __name__ == "__main__":
    main()
