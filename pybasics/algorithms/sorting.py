"""
Comparison sorts.

Every function takes a sequence and returns a new non-decreasing list; the
input is never modified.

| Algorithm      | Time (avg / worst)   | Extra space | Stable |
|----------------|----------------------|-------------|--------|
| bubble_sort    | O(n^2) / O(n^2)      | O(1)        | yes    |
| quick_sort     | O(n log n) / O(n^2)  | O(log n)    | no     |
| merge_sort     | O(n log n)           | O(n)        | yes    |
| insertion_sort | O(n^2), O(n) sorted  | O(1)        | yes    |
"""

import random
from typing import List, Sequence

RANDOM_ARRAY_SIZE = 10
RANDOM_UPPER_BOUND = 100


def bubble_sort(values: Sequence[int]) -> List[int]:
    arr = list(values)
    n = len(arr)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        # No swaps means the rest is already in order
        if not swapped:
            break
    return arr


def quick_sort(values: Sequence[int]) -> List[int]:
    arr = list(values)
    _quick_sort(arr, 0, len(arr) - 1)
    return arr


def _quick_sort(arr: List[int], low: int, high: int) -> None:
    # Recurse into the smaller side and loop over the larger one, which keeps
    # the stack depth at O(log n) even for already sorted input.
    while low < high:
        pi = _partition(arr, low, high)
        if pi - low < high - pi:
            _quick_sort(arr, low, pi - 1)
            low = pi + 1
        else:
            _quick_sort(arr, pi + 1, high)
            high = pi - 1


def _partition(arr: List[int], low: int, high: int) -> int:
    # Lomuto scheme, rightmost element as pivot
    pivot = arr[high]
    i = low - 1
    for j in range(low, high):
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1


def merge_sort(values: Sequence[int]) -> List[int]:
    arr = list(values)
    if len(arr) <= 1:
        return arr

    mid = len(arr) // 2
    return _merge(merge_sort(arr[:mid]), merge_sort(arr[mid:]))


def _merge(left: List[int], right: List[int]) -> List[int]:
    result = []
    i = j = 0

    while i < len(left) and j < len(right):
        # <= keeps equal elements in their original order
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    result.extend(left[i:])
    result.extend(right[j:])
    return result


def insertion_sort(values: Sequence[int]) -> List[int]:
    arr = list(values)
    for i in range(1, len(arr)):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return arr


def generate_random_array(size: int = RANDOM_ARRAY_SIZE, upper: int = RANDOM_UPPER_BOUND) -> List[int]:
    return [random.randrange(upper) for _ in range(size)]


def is_sorted(values: Sequence[int]) -> bool:
    return all(values[i - 1] <= values[i] for i in range(1, len(values)))


SORTS = [
    ("Bubble Sort", bubble_sort),
    ("Quick Sort", quick_sort),
    ("Merge Sort", merge_sort),
    ("Insertion Sort", insertion_sort),
]


def main():
    for number, (name, sort) in enumerate(SORTS, start=1):
        print(f"Example {number}: {name}")
        arr = generate_random_array()
        print(f"Original array: {arr}")
        result = sort(arr)
        print(f"Sorted array: {result}")
        print(f"Is sorted? {is_sorted(result)}\n")


if __name__ == "__main__":
    main()
