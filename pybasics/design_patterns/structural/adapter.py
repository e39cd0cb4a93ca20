"""
Adapter: wrap an object with an incompatible interface so it satisfies the
interface the client expects.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Target(ABC):
    """Interface the client code works with."""

    @abstractmethod
    def request(self) -> str:
        ...


class Adaptee:
    """Useful behavior behind an interface the client does not know."""

    def specific_request(self) -> str:
        return "Specific request from Adaptee"


class Adapter(Target):
    def __init__(self, adaptee: Optional[Adaptee] = None):
        self._adaptee = adaptee if adaptee is not None else Adaptee()

    def request(self) -> str:
        return "Adapter: " + self._adaptee.specific_request()


def client_code(target: Target) -> str:
    return target.request()


def main():
    adapter = Adapter()
    print(client_code(adapter))


if __name__ == "__main__":
    main()
