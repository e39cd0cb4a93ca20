import logging
import os

from . import (
    concurrency,
    control_flow,
    error_handling,
    functions,
    sequences,
    standard_library,
    structs,
    variables,
)

DEMOS = [
    ("Variables", variables.main),
    ("Control Flow", control_flow.main),
    ("Functions", functions.main),
    ("Structs", structs.main),
    ("Sequences", sequences.main),
    ("Standard Library", standard_library.main),
    ("Error Handling", error_handling.main),
    ("Concurrency", concurrency.main),
]


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("PYBASICS_LOG_LEVEL", "WARNING").upper())

    for title, demo in DEMOS:
        print(f"=== {title} ===")
        demo()
        print()
