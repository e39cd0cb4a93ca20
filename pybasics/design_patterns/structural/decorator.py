"""
Decorator: attach responsibilities to an object at runtime by wrapping it in
objects that share its interface.
"""

from abc import ABC, abstractmethod


class Coffee(ABC):
    @abstractmethod
    def get_cost(self) -> float:
        ...

    @abstractmethod
    def get_description(self) -> str:
        ...


class SimpleCoffee(Coffee):
    def __init__(self, size: str = "regular"):
        self.size = size

    def get_cost(self) -> float:
        return 1.0

    def get_description(self) -> str:
        return "Simple coffee"


class CoffeeDecorator(Coffee):
    """Base wrapper: adds ``extra_cost`` and ``extra_description`` to the wrapped coffee."""

    extra_cost = 0.0
    extra_description = ""

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    def get_cost(self) -> float:
        return self._coffee.get_cost() + self.extra_cost

    def get_description(self) -> str:
        return self._coffee.get_description() + self.extra_description

    # From the wrapped coffee
    def __getattr__(self, name):
        # Not set yet while copying or unpickling
        if name == "_coffee":
            raise AttributeError(name)
        return getattr(self._coffee, name)


class MilkDecorator(CoffeeDecorator):
    extra_cost = 0.5
    extra_description = ", milk"


class SugarDecorator(CoffeeDecorator):
    extra_cost = 0.2
    extra_description = ", sugar"


class WhipDecorator(CoffeeDecorator):
    extra_cost = 0.7
    extra_description = ", whip"


def main():
    coffee = SimpleCoffee()
    coffee_with_milk = MilkDecorator(coffee)
    coffee_with_milk_and_sugar = SugarDecorator(coffee_with_milk)

    print(
        f"Cost: {coffee_with_milk_and_sugar.get_cost():.2f}, "
        f"Description: {coffee_with_milk_and_sugar.get_description()}"
    )

    fancy = WhipDecorator(coffee_with_milk_and_sugar)
    print(f"Cost: {fancy.get_cost():.2f}, Description: {fancy.get_description()} ({fancy.size})")


if __name__ == "__main__":
    main()
