"""
Records with dataclasses: fields, nested composition, methods that read
and methods that mutate, and one-off anonymous records.
"""

from dataclasses import dataclass, field
from types import SimpleNamespace


@dataclass
class Address:
    street: str
    city: str
    country: str


@dataclass
class Person:
    name: str
    age: int
    address: Address = field(default_factory=lambda: Address("", "", ""))

    def greet(self) -> str:
        return f"Hello, my name is {self.name} and I'm {self.age} years old"

    def birthday(self) -> None:
        self.age += 1


def main():
    address = Address(street="123 Main St", city="Bangkok", country="Thailand")
    person = Person(name="John", age=25, address=address)

    print(f"Person: {person}")
    print(f"Address: {person.address}")

    print(person.greet())

    person.birthday()
    print(f"After birthday: {person.age} years old")

    employee = SimpleNamespace(id=1, role="Developer", active=True)
    print(f"Employee: {employee}")


if __name__ == "__main__":
    main()
