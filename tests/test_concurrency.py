"""Unit tests for the thread and queue demos."""

import queue
import threading

from pybasics.basics.concurrency import (
    BUFFER_SIZE,
    CLOSED,
    generate_numbers,
    main,
    print_numbers,
    receive_all,
    run_workers,
    send_after,
)


class TestWorkers:
    """Tests for the parallel printers."""

    def test_print_numbers(self, capsys) -> None:
        assert print_numbers(1, 3, delay=0) == [1, 2, 3]
        assert capsys.readouterr().out == "Number: 1\nNumber: 2\nNumber: 3\n"

    def test_run_workers_waits_for_both(self, capsys) -> None:
        """Test that both workers finish and every number is printed once."""
        results = run_workers(delay=0)
        lines = capsys.readouterr().out.splitlines()

        assert results == [[1, 2, 3], [4, 5, 6]]
        assert sorted(lines) == [f"Number: {i}" for i in range(1, 7)]


class TestChannels:
    """Tests for queue-based message passing."""

    def test_receive_until_closed(self) -> None:
        """Test that the receiver gets every value in order, then stops."""
        channel: queue.Queue = queue.Queue(maxsize=1)
        producer = threading.Thread(target=generate_numbers, args=(channel, 5, 0))
        producer.start()

        received = receive_all(channel)
        producer.join()

        assert received == [1, 2, 3, 4, 5]

    def test_closed_marker_ends_stream(self) -> None:
        channel: queue.Queue = queue.Queue()
        for item in ("a", CLOSED, "b"):
            channel.put(item)

        assert receive_all(channel) == ["a"]

    def test_send_after(self) -> None:
        assert send_after("hi", 0) == "hi"


def test_main_output(capsys) -> None:
    """Test the demo output."""
    main()
    out = capsys.readouterr().out

    for i in range(1, 6):
        assert f"Received: {i}" in out
    for i in range(1, BUFFER_SIZE + 1):
        assert f"From buffered channel: {i}" in out
    assert out.index("Message from channel 1") < out.index("Message from channel 2")


def test_main_receives_in_order(capsys) -> None:
    """Test that the channel demo prints values in the order they were sent."""
    main()
    lines = [line for line in capsys.readouterr().out.splitlines() if line.startswith("Received: ")]

    assert lines == [f"Received: {i}" for i in range(1, 6)]
