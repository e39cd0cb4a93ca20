"""
Dynamic programming: solve a problem from the answers to its overlapping
subproblems, computing each subproblem once.
"""

from functools import lru_cache
from typing import List, Sequence


def fibonacci_recursive(n: int) -> int:
    # O(2^n): recomputes the same subproblems over and over
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_dp(n: int) -> int:
    """Bottom-up table, O(n) time and space."""
    if n <= 1:
        return n

    dp = [0] * (n + 1)
    dp[1] = 1
    for i in range(2, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]
    return dp[n]


@lru_cache(maxsize=None)
def fibonacci_memo(n: int) -> int:
    """Top-down recursion with memoization."""
    if n <= 1:
        return n
    return fibonacci_memo(n - 1) + fibonacci_memo(n - 2)


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence. O(m*n)."""
    m, n = len(text1), len(text2)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if text1[i - 1] == text2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    return dp[m][n]


def knapsack(values: Sequence[int], weights: Sequence[int], capacity: int) -> int:
    """0/1 knapsack: best total value within ``capacity``. O(n*W)."""
    if len(values) != len(weights):
        raise ValueError("values and weights must have the same length")

    n = len(values)
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        for w in range(capacity + 1):
            if weights[i - 1] <= w:
                dp[i][w] = max(values[i - 1] + dp[i - 1][w - weights[i - 1]], dp[i - 1][w])
            else:
                dp[i][w] = dp[i - 1][w]

    return dp[n][capacity]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 when impossible."""
    impossible = amount + 1
    dp = [impossible] * (amount + 1)
    dp[0] = 0

    for i in range(1, amount + 1):
        for coin in coins:
            if coin <= i:
                dp[i] = min(dp[i], dp[i - coin] + 1)

    return -1 if dp[amount] > amount else dp[amount]


def main():
    n = 10
    print(f"Fibonacci({n}) using recursion: {fibonacci_recursive(n)}")
    print(f"Fibonacci({n}) using DP: {fibonacci_dp(n)}")
    print(f"Fibonacci({n}) using memoization: {fibonacci_memo(n)}\n")

    text1, text2 = "abcde", "ace"
    lcs = longest_common_subsequence(text1, text2)
    print(f"Length of Longest Common Subsequence between '{text1}' and '{text2}': {lcs}\n")

    values = [60, 100, 120]
    weights = [10, 20, 30]
    capacity = 50
    print(f"Maximum value in Knapsack: {knapsack(values, weights, capacity)}\n")

    coins = [1, 2, 5]
    amount = 11
    min_coins = coin_change(coins, amount)
    if min_coins != -1:
        print(f"Minimum coins needed for amount {amount}: {min_coins}")
    else:
        print(f"Cannot make amount {amount} with given coins")


if __name__ == "__main__":
    main()
