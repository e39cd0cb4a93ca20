"""Unit tests for the comparison sorts."""

import random

import pytest

from pybasics.algorithms.sorting import (
    SORTS,
    generate_random_array,
    is_sorted,
    main,
)

SORT_FUNCTIONS = [sort for _, sort in SORTS]


@pytest.mark.parametrize("sort", SORT_FUNCTIONS, ids=[name for name, _ in SORTS])
class TestSorts:
    """Tests shared by every sort."""

    def test_sorts_random_input(self, sort) -> None:
        """Test the result is the sorted permutation of the input."""
        rng = random.Random(42)
        values = [rng.randrange(-50, 50) for _ in range(60)]

        assert sort(values) == sorted(values)

    def test_input_is_not_modified(self, sort) -> None:
        """Test that sorting returns a new list."""
        values = [3, 1, 2]
        result = sort(values)

        assert values == [3, 1, 2]
        assert result is not values

    @pytest.mark.parametrize("values", [[], [1], [2, 2, 2], [1, 2, 3, 4], [4, 3, 2, 1]])
    def test_edge_inputs(self, sort, values) -> None:
        """Test empty, single, repeated, sorted and reversed inputs."""
        assert sort(values) == sorted(values)

    def test_long_sorted_input(self, sort) -> None:
        """Test already sorted input of moderate size."""
        values = list(range(1500))

        assert sort(values) == values


class TestHelpers:
    """Tests for the array helpers."""

    def test_generate_random_array(self) -> None:
        """Test size and bounds of generated arrays."""
        arr = generate_random_array(size=25, upper=10)

        assert len(arr) == 25
        assert all(0 <= value < 10 for value in arr)

    def test_is_sorted(self) -> None:
        """Test the sortedness check."""
        assert is_sorted([]) is True
        assert is_sorted([1, 1, 2]) is True
        assert is_sorted([2, 1]) is False


def test_main_output(capsys) -> None:
    """Test every demo reports a sorted array."""
    main()
    out = capsys.readouterr().out

    assert out.count("Is sorted? True") == 4
    assert "Is sorted? False" not in out
