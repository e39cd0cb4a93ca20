"""
Error handling with exceptions: custom exception types, raising and
catching, branching on the exception type, and unwinding from a deliberate
failure with recovery at the top.
"""

import logging
import math
from typing import Callable, Optional

LOGGER = logging.getLogger(__name__)


class DivisionError(ZeroDivisionError):
    def __init__(self, dividend: int, divisor: int, message: str):
        super().__init__(message)
        self.dividend = dividend
        self.divisor = divisor
        self.message = message

    def __str__(self) -> str:
        return f"{self.message}: {self.dividend} / {self.divisor}"


def divide(dividend: int, divisor: int) -> int:
    if divisor == 0:
        raise DivisionError(dividend, divisor, "cannot divide by zero")
    return dividend // divisor


def calculate_square_root(x: float) -> float:
    if x < 0:
        raise ValueError("cannot calculate square root of negative number")
    return math.sqrt(x)


def recover(fn: Callable[[], object]) -> Optional[BaseException]:
    """Run ``fn``; if it raises, report the failure and return the exception."""
    try:
        fn()
    except Exception as e:
        LOGGER.debug("recovered from failure", exc_info=True)
        print(f"Recovered from panic: {e}")
        return e
    return None


def _fail_deliberately() -> None:
    # Nothing after the raise runs
    raise RuntimeError("something went wrong!")


def main():
    print("=== Basic Error Handling ===")
    try:
        result = divide(10, 0)
    except DivisionError as e:
        print(f"Error: {e}")
    else:
        print(f"Result: {result}")

    print("\n=== Multiple Error Cases ===")
    numbers = [10, 0, 5, 2]
    for a, b in zip(numbers, numbers[1:]):
        try:
            result = divide(a, b)
        except DivisionError as e:
            print(f"Custom division error: {e}")
            continue
        except ArithmeticError as e:
            print(f"Other error: {e}")
            continue
        print(f"{a} / {b} = {result}")

    print("\n=== Built-in Exceptions ===")
    try:
        root = calculate_square_root(-4)
    except ValueError as e:
        print(f"Square root error: {e}")
    else:
        print(f"Square root: {root:f}")

    print("\n=== Raise and Recover ===")
    recover(_fail_deliberately)


if __name__ == "__main__":
    main()
