"""
Singleton: one shared instance, created lazily on first use.

The shared instance lives in an explicit provider handle instead of a module
global. The caller creates the provider once and passes it to every consumer,
so the lifetime of the "single" instance is visible and tests can make fresh
providers.
"""

import logging
import threading
from typing import Optional

LOGGER = logging.getLogger(__name__)


class Counter:
    def __init__(self):
        self._count = 0

    def increment_count(self) -> int:
        self._count += 1
        return self._count

    def get_count(self) -> int:
        return self._count


class CounterProvider:
    """Owns the single Counter for one process run."""

    def __init__(self):
        self._instance: Optional[Counter] = None
        self._lock = threading.Lock()

    def get_instance(self) -> Counter:
        # Double-checked so concurrent first calls still create one instance
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    LOGGER.debug("creating shared Counter")
                    self._instance = Counter()
        return self._instance


class RequestHandler:
    """A consumer that receives the provider instead of reaching for a global."""

    def __init__(self, name: str, provider: CounterProvider):
        self.name = name
        self._provider = provider

    def handle(self) -> int:
        return self._provider.get_instance().increment_count()


def main():
    provider = CounterProvider()

    singleton1 = provider.get_instance()
    singleton2 = provider.get_instance()

    singleton1.increment_count()
    print(f"Singleton1 count: {singleton1.get_count()}")
    print(f"Singleton2 count: {singleton2.get_count()}")
    print(f"Same instance? {singleton1 is singleton2}")

    handlers = [RequestHandler("api", provider), RequestHandler("worker", provider)]
    for handler in handlers:
        print(f"Handler {handler.name} raised count to {handler.handle()}")


if __name__ == "__main__":
    main()
