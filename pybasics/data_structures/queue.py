"""
FIFO queue. Items leave from the front and join at the back.

Backed by collections.deque so dequeue is O(1) instead of the O(n)
front removal of a plain list.
"""

import logging
from collections import deque
from typing import Any

LOGGER = logging.getLogger(__name__)


class EmptyQueueError(IndexError):
    """Raised when dequeuing or peeking an empty queue."""


class Queue:
    def __init__(self):
        self._items: deque = deque()

    def enqueue(self, item: Any) -> None:
        self._items.append(item)

    def dequeue(self) -> Any:
        if not self._items:
            LOGGER.debug("dequeue on empty queue")
            raise EmptyQueueError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)


def main():
    queue = Queue()

    print("Example 1: Enqueuing elements")
    print("Enqueuing: 1, 2, 3")
    for value in (1, 2, 3):
        queue.enqueue(value)

    print("\nExample 2: Queue Status")
    print(f"Queue size: {queue.size()}")
    print(f"Front element: {queue.peek()}")

    print("\nExample 3: Dequeuing elements")
    print("Dequeuing all elements:")
    while not queue.is_empty():
        print(f"Dequeued: {queue.dequeue()}")

    print("\nExample 4: Error handling")
    print("Trying to dequeue from empty queue:")
    try:
        queue.dequeue()
    except EmptyQueueError as e:
        print(f"Error: {e}")

    print("\nExample 5: Mixed operations")
    queue.enqueue(10)
    queue.enqueue(20)
    print(f"Dequeued: {queue.dequeue()}")
    queue.enqueue(30)
    print(f"Final queue size: {queue.size()}")


if __name__ == "__main__":
    main()
