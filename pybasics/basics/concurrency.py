"""
Concurrency with threads and queues.

- Two workers run in parallel on a thread pool; the caller waits for both.
- A producer sends values over a queue and closes it with a sentinel.
- A bounded queue accepts a few values before a sender would block.
- Two delayed senders race; the receiver takes whichever finishes first.
"""

import logging
import queue
import time
from concurrent.futures import ThreadPoolExecutor, as_completed, wait
from typing import Any, List

LOGGER = logging.getLogger(__name__)

# Simulated work per step, in seconds
WORK_DELAY = 0.1
BUFFER_SIZE = 3

# Marks a closed channel
CLOSED = object()


def print_numbers(start: int, end: int, delay: float = WORK_DELAY) -> List[int]:
    LOGGER.debug("worker %d..%d started", start, end)
    printed = []
    for i in range(start, end + 1):
        time.sleep(delay)
        print(f"Number: {i}")
        printed.append(i)
    LOGGER.debug("worker %d..%d finished", start, end)
    return printed


def run_workers(delay: float = WORK_DELAY) -> List[List[int]]:
    """Run two printers in parallel and block until both are done."""
    with ThreadPoolExecutor(max_workers=2) as executor:
        futures = [
            executor.submit(print_numbers, 1, 3, delay),
            executor.submit(print_numbers, 4, 6, delay),
        ]
        wait(futures)
        return [future.result() for future in futures]


def generate_numbers(channel: queue.Queue, count: int = 5, delay: float = WORK_DELAY) -> None:
    for i in range(1, count + 1):
        channel.put(i)
        time.sleep(delay)
    # Close: tell the receiver no more values are coming
    channel.put(CLOSED)


def receive_all(channel: queue.Queue) -> List[Any]:
    return list(iter(channel.get, CLOSED))


def send_after(message: str, delay: float) -> str:
    time.sleep(delay)
    return message


def main():
    print("Thread Pool Example:")
    run_workers()

    print("\nChannel Example:")
    # maxsize=1 is the closest a Queue gets to an unbuffered channel
    numbers: queue.Queue = queue.Queue(maxsize=1)
    with ThreadPoolExecutor(max_workers=1) as executor:
        producer = executor.submit(generate_numbers, numbers)
        for num in receive_all(numbers):
            print(f"Received: {num}")
        producer.result()

    print("\nBuffered Channel Example:")
    buffered: queue.Queue = queue.Queue(maxsize=BUFFER_SIZE)
    # The buffer has room, so none of these block
    for value in (1, 2, 3):
        buffered.put_nowait(value)
    for _ in range(BUFFER_SIZE):
        print(f"From buffered channel: {buffered.get_nowait()}")

    print("\nSelect Example:")
    with ThreadPoolExecutor(max_workers=2) as executor:
        futures = [
            executor.submit(send_after, "Message from channel 1", WORK_DELAY),
            executor.submit(send_after, "Message from channel 2", 2 * WORK_DELAY),
        ]
        for future in as_completed(futures):
            print(future.result())


if __name__ == "__main__":
    main()
