"""Unit tests for the searching algorithms."""

import pytest

from pybasics.algorithms.searching import SEARCHES, linear_search, main

SORTED = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19]


@pytest.mark.parametrize("search", [s for _, s in SEARCHES], ids=[n for n, _ in SEARCHES])
class TestSearches:
    """Tests shared by every search on sorted input."""

    def test_finds_every_element(self, search) -> None:
        """Test that each present value is found at its index."""
        for index, value in enumerate(SORTED):
            assert search(SORTED, value) == index

    @pytest.mark.parametrize("target", [0, 10, 20])
    def test_missing_target(self, search, target) -> None:
        """Test below-range, in-gap and above-range misses."""
        assert search(SORTED, target) == -1

    def test_empty_input(self, search) -> None:
        """Test that an empty array returns -1."""
        assert search([], 5) == -1

    def test_single_element(self, search) -> None:
        """Test one-element arrays."""
        assert search([4], 4) == 0
        assert search([4], 5) == -1

    def test_repeated_values(self, search) -> None:
        """Test that a returned index holds the target when values repeat."""
        arr = [2, 2, 2, 2]

        assert arr[search(arr, 2)] == 2
        assert search(arr, 3) == -1


class TestLinearSearch:
    """Tests for linear_search on unsorted data."""

    def test_unsorted_input(self) -> None:
        """Test that the first occurrence is returned."""
        assert linear_search([9, 4, 7, 4], 4) == 1


def test_main_output(capsys) -> None:
    """Test the demo output."""
    main()
    out = capsys.readouterr().out

    assert out.count("Element found at index: 6") == 4
    assert "Binary Search: -1" in out
