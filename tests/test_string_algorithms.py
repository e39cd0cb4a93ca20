"""Unit tests for the string algorithms."""

import pytest

from pybasics.algorithms.string_algorithms import (
    compute_lps_array,
    kmp_search,
    levenshtein_distance,
    longest_palindromic_substring,
    main,
    rabin_karp,
)

MATCHERS = [kmp_search, rabin_karp]


class TestLpsArray:
    """Tests for compute_lps_array."""

    def test_values(self) -> None:
        assert compute_lps_array("AABAACAABAA") == [0, 1, 0, 1, 2, 0, 1, 2, 3, 4, 5]

    def test_empty(self) -> None:
        assert compute_lps_array("") == []


@pytest.mark.parametrize("search", MATCHERS, ids=["kmp", "rabin_karp"])
class TestPatternMatching:
    """Tests shared by KMP and Rabin-Karp."""

    def test_kmp_example(self, search) -> None:
        assert search("AABAACAADAABAAABAA", "AABA") == [0, 9, 13]

    def test_rabin_karp_example(self, search) -> None:
        assert search("GEEKS FOR GEEKS", "GEEK") == [0, 10]

    def test_overlapping_matches(self, search) -> None:
        """Test that overlapping occurrences are all reported."""
        assert search("AAAA", "AA") == [0, 1, 2]

    def test_no_match(self, search) -> None:
        assert search("abcdef", "xyz") == []

    def test_pattern_longer_than_text(self, search) -> None:
        assert search("ab", "abc") == []

    def test_empty_pattern(self, search) -> None:
        assert search("abc", "") == []

    def test_matches_agree_with_slicing(self, search) -> None:
        """Test every reported index holds the pattern, and none is missed."""
        text, pattern = "abababcabababcab", "abab"
        expected = [i for i in range(len(text) - len(pattern) + 1) if text[i:i + len(pattern)] == pattern]

        assert search(text, pattern) == expected


class TestLevenshtein:
    """Tests for levenshtein_distance."""

    @pytest.mark.parametrize(
        "s1, s2, expected",
        [("kitten", "sitting", 3), ("", "abc", 3), ("abc", "abc", 0), ("flaw", "lawn", 2)],
    )
    def test_distance(self, s1, s2, expected) -> None:
        assert levenshtein_distance(s1, s2) == expected

    def test_symmetric(self) -> None:
        assert levenshtein_distance("sunday", "saturday") == levenshtein_distance("saturday", "sunday")


class TestLongestPalindrome:
    """Tests for longest_palindromic_substring."""

    @pytest.mark.parametrize(
        "text, expected",
        [("babad", "bab"), ("cbbd", "bb"), ("a", "a"), ("", ""), ("forgeeksskeegfor", "geeksskeeg")],
    )
    def test_examples(self, text, expected) -> None:
        assert longest_palindromic_substring(text) == expected


def test_main_output(capsys) -> None:
    """Test the demo output."""
    main()
    out = capsys.readouterr().out

    assert "Pattern found at indices: [0, 9, 13]" in out
    assert "Pattern found at indices: [0, 10]" in out
    assert "Edit distance: 3" in out
    assert "Longest palindrome: bab" in out
