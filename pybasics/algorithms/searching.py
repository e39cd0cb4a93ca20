"""
Searching algorithms.

Each function returns an index ``i`` with ``arr[i] == target`` or -1.
Only linear_search accepts unsorted input.

- linear_search: O(n)
- binary_search: O(log n)
- jump_search: O(sqrt n)
- interpolation_search: O(log log n) on uniform data, O(n) worst case
"""

import math
from typing import Sequence


def linear_search(arr: Sequence[int], target: int) -> int:
    for i, value in enumerate(arr):
        if value == target:
            return i
    return -1


def binary_search(arr: Sequence[int], target: int) -> int:
    left, right = 0, len(arr) - 1

    while left <= right:
        mid = left + (right - left) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return -1


def jump_search(arr: Sequence[int], target: int) -> int:
    n = len(arr)
    if n == 0:
        return -1

    jump = int(math.sqrt(n))
    step = jump
    prev = 0

    # Find the block that may hold the target
    while arr[min(step, n) - 1] < target:
        prev = step
        step += jump
        if prev >= n:
            return -1

    # Linear scan inside the block
    while arr[prev] < target:
        prev += 1
        if prev == min(step, n):
            return -1

    if arr[prev] == target:
        return prev
    return -1


def interpolation_search(arr: Sequence[int], target: int) -> int:
    low, high = 0, len(arr) - 1

    while low <= high and arr[low] <= target <= arr[high]:
        # A flat range has no slope to interpolate (the denominator would be zero)
        if arr[high] == arr[low]:
            return low if arr[low] == target else -1

        pos = low + ((high - low) * (target - arr[low])) // (arr[high] - arr[low])

        if arr[pos] == target:
            return pos
        if arr[pos] < target:
            low = pos + 1
        else:
            high = pos - 1

    return -1


SEARCHES = [
    ("Linear Search", linear_search),
    ("Binary Search", binary_search),
    ("Jump Search", jump_search),
    ("Interpolation Search", interpolation_search),
]


def main():
    arr = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19]
    target = 13
    print(f"Searching for {target} in array: {arr}\n")

    for number, (name, search) in enumerate(SEARCHES, start=1):
        print(f"Example {number}: {name}")
        result = search(arr, target)
        if result != -1:
            print(f"Element found at index: {result}\n")
        else:
            print("Element not found\n")

    target = 10
    print(f"Searching for non-existent element {target}:")
    for name, search in SEARCHES:
        print(f"{name}: {search(arr, target)}")


if __name__ == "__main__":
    main()
