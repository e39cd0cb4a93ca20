"""
Fixed-size tuples and growable lists: slicing, pre-sizing, appending and
combining.
"""

from typing import List, Sequence


def combine(first: Sequence[int], second: Sequence[int]) -> List[int]:
    return [*first, *second]


def main():
    print("Tuple Examples:")
    # Tuples are immutable, their length is fixed once created
    numbers = (1, 2, 3, 4, 5)
    print(f"Tuple: {numbers}")

    fruits = ("apple", "banana", "orange")
    print(f"Fruits: {fruits}")

    print("\nList Examples:")
    # Slicing copies the elements from index 1 up to (not including) 4
    numbers_slice = list(numbers[1:4])
    print(f"Slice from tuple: {numbers_slice}")

    dynamic = [0] * 3
    print(f"Pre-sized list: {dynamic} (len={len(dynamic)})")

    dynamic.extend([1, 2, 3])
    print(f"After extend: {dynamic} (len={len(dynamic)})")

    print(f"Combined lists: {combine([1, 2, 3], [4, 5, 6])}")


if __name__ == "__main__":
    main()
