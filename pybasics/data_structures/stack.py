"""
LIFO stack backed by a Python list; the end of the list is the top.

push is amortized O(1), pop and peek are O(1).
"""

import logging
from typing import Any, List

LOGGER = logging.getLogger(__name__)

BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


class EmptyStackError(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack:
    def __init__(self):
        self._items: List[Any] = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Any:
        if not self._items:
            LOGGER.debug("pop on empty stack")
            raise EmptyStackError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise EmptyStackError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)


def is_valid_brackets(text: str) -> bool:
    """Check that every (, [ and { in ``text`` is closed in the right order."""
    stack = Stack()

    for ch in text:
        if ch in "([{":
            stack.push(ch)
        elif ch in BRACKET_PAIRS:
            # More closing than opening brackets
            if stack.is_empty():
                return False
            if stack.pop() != BRACKET_PAIRS[ch]:
                return False

    return stack.is_empty()


def main():
    stack = Stack()

    print("Example 1: Pushing elements")
    print("Pushing: 1, 2, 3")
    for value in (1, 2, 3):
        stack.push(value)

    print("\nExample 2: Stack Status")
    print(f"Stack size: {stack.size()}")
    print(f"Top element: {stack.peek()}")

    print("\nExample 3: Popping elements")
    print("Popping all elements:")
    while not stack.is_empty():
        print(f"Popped: {stack.pop()}")

    print("\nExample 4: Error handling")
    print("Trying to pop from empty stack:")
    try:
        stack.pop()
    except EmptyStackError as e:
        print(f"Error: {e}")

    print("\nExample 5: Bracket Matching Example")
    for test in ("((()))", "(()())", "(()", ")(", "{[()]}", "([)]"):
        print(f"Is '{test}' valid? {is_valid_brackets(test)}")


if __name__ == "__main__":
    main()
