import logging
import os

from . import dynamic_programming, greedy, searching, sorting, string_algorithms

DEMOS = [
    ("Sorting", sorting.main),
    ("Searching", searching.main),
    ("Dynamic Programming", dynamic_programming.main),
    ("Greedy", greedy.main),
    ("String Algorithms", string_algorithms.main),
]


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("PYBASICS_LOG_LEVEL", "WARNING").upper())

    for title, demo in DEMOS:
        print(f"=== {title} ===")
        demo()
        print()
