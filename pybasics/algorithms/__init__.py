"""
Canonical algorithms: sorting, searching, dynamic programming, greedy and
string matching. Every function is pure over its inputs.
"""

from .sorting import bubble_sort, insertion_sort, is_sorted, merge_sort, quick_sort
from .searching import binary_search, interpolation_search, jump_search, linear_search
from .dynamic_programming import (
    coin_change,
    fibonacci_dp,
    fibonacci_memo,
    fibonacci_recursive,
    knapsack,
    longest_common_subsequence,
)
from .greedy import (
    Activity,
    HuffmanNode,
    Item,
    WeightedEdge,
    activity_selection,
    build_huffman_tree,
    dijkstra_shortest_path,
    fractional_knapsack,
    huffman_codes,
)
from .string_algorithms import (
    compute_lps_array,
    kmp_search,
    levenshtein_distance,
    longest_palindromic_substring,
    rabin_karp,
)

__all__ = [
    "bubble_sort",
    "quick_sort",
    "merge_sort",
    "insertion_sort",
    "is_sorted",
    "linear_search",
    "binary_search",
    "jump_search",
    "interpolation_search",
    "fibonacci_recursive",
    "fibonacci_dp",
    "fibonacci_memo",
    "longest_common_subsequence",
    "knapsack",
    "coin_change",
    "Activity",
    "activity_selection",
    "Item",
    "fractional_knapsack",
    "HuffmanNode",
    "build_huffman_tree",
    "huffman_codes",
    "WeightedEdge",
    "dijkstra_shortest_path",
    "compute_lps_array",
    "kmp_search",
    "rabin_karp",
    "levenshtein_distance",
    "longest_palindromic_substring",
]
