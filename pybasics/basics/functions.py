"""
Functions: parameters and return values, multiple results, variadic
arguments, functions as values, closures, methods, deferred calls.
"""

from contextlib import ExitStack
from typing import Callable, Tuple


def add(a: int, b: int) -> int:
    return a + b


def divide(a: float, b: float) -> float:
    if b == 0:
        raise ValueError("division by zero")
    return a / b


def rectangle(width: float, height: float) -> Tuple[float, float]:
    area = width * height
    perimeter = 2 * (width + height)
    return area, perimeter


def total(*numbers: int) -> int:
    result = 0
    for number in numbers:
        result += number
    return result


def calculate(operation: Callable[[int, int], int], a: int, b: int) -> int:
    return operation(a, b)


def counter() -> Callable[[], int]:
    count = 0

    def increment() -> int:
        nonlocal count
        count += 1
        return count

    return increment


class Person:
    def __init__(self, first_name: str, last_name: str):
        self.first_name = first_name
        self.last_name = last_name

    def full_name(self) -> str:
        return self.first_name + " " + self.last_name

    def change_first_name(self, new_name: str) -> None:
        self.first_name = new_name


def main():
    with ExitStack() as deferred:
        # Registered callbacks run when the block exits, after everything below
        deferred.callback(print, "This will be printed last")

        print("=== Basic Function ===")
        print(f"5 + 3 = {add(5, 3)}")

        print("\n=== Multiple Return Values ===")
        try:
            print(f"10 / 2 = {divide(10, 2):.2f}")
        except ValueError as e:
            print(f"Error: {e}")

        print("\n=== Tuple Return Values ===")
        area, perimeter = rectangle(5, 3)
        print(f"Rectangle 5x3 - Area: {area:.2f}, Perimeter: {perimeter:.2f}")

        print("\n=== Variadic Function ===")
        print(f"Sum of 1,2,3: {total(1, 2, 3)}")
        numbers = [1, 2, 3, 4, 5]
        print(f"Sum of list: {total(*numbers)}")

        print("\n=== Function as Parameter ===")
        print(f"Calculate multiply 4 * 5: {calculate(lambda a, b: a * b, 4, 5)}")

        print("\n=== Closure ===")
        increment = counter()
        for _ in range(3):
            print(f"Count: {increment()}")

        print("\n=== Methods ===")
        person = Person("John", "Doe")
        print(f"Full name: {person.full_name()}")
        person.change_first_name("Jane")
        print(f"After name change: {person.full_name()}")

        print("\n=== Defer Example ===")
        print("This will be printed first")


if __name__ == "__main__":
    main()
