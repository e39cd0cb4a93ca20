import logging
import os

from . import graph, linked_list, queue, stack, tree

DEMOS = [
    ("Linked List", linked_list.main),
    ("Stack", stack.main),
    ("Queue", queue.main),
    ("Graph", graph.main),
    ("Binary Search Tree", tree.main),
]


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("PYBASICS_LOG_LEVEL", "WARNING").upper())

    for title, demo in DEMOS:
        print(f"=== {title} ===")
        demo()
        print()
