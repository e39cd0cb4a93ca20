"""
Singly linked list.

insert appends at the tail by walking the chain (O(n)); keeping a tail
pointer would make it O(1).
"""

from typing import Any, Iterator, List, Optional


class Node:
    def __init__(self, data: Any):
        self.data = data
        self.next: Optional["Node"] = None


class LinkedList:
    def __init__(self):
        self.head: Optional[Node] = None

    def insert(self, data: Any) -> None:
        new_node = Node(data)

        if self.head is None:
            self.head = new_node
            return

        current = self.head
        while current.next is not None:
            current = current.next
        current.next = new_node

    def delete(self, data: Any) -> bool:
        """Remove the first node holding ``data``. Return True if one was found."""
        if self.head is None:
            return False

        if self.head.data == data:
            self.head = self.head.next
            return True

        current = self.head
        while current.next is not None:
            if current.next.data == data:
                current.next = current.next.next
                return True
            current = current.next
        return False

    def to_list(self) -> List[Any]:
        return list(self)

    def render(self) -> str:
        return "".join(f"{value} -> " for value in self) + "nil"

    def print(self) -> None:
        print(self.render())

    def __iter__(self) -> Iterator[Any]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self)


def main():
    linked_list = LinkedList()

    print("Example 1: Inserting elements")
    for value in (1, 2, 3, 4):
        linked_list.insert(value)
    print("Original List: ", end="")
    linked_list.print()

    print("\nExample 2: Deleting element 2")
    linked_list.delete(2)
    print("After deleting 2: ", end="")
    linked_list.print()

    print("\nExample 3: Inserting element 5")
    linked_list.insert(5)
    print("After inserting 5: ", end="")
    linked_list.print()


if __name__ == "__main__":
    main()
