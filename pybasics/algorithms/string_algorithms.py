"""
String algorithms: pattern matching, edit distance, palindromes.
"""

from typing import List

# Rolling hash parameters for Rabin-Karp
RABIN_KARP_BASE = 256
RABIN_KARP_PRIME = 101


def compute_lps_array(pattern: str) -> List[int]:
    """lps[i] is the length of the longest proper prefix of pattern[:i+1] that is also its suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1

    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length != 0:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1

    return lps


def kmp_search(text: str, pattern: str) -> List[int]:
    """Knuth-Morris-Pratt. Start index of every (possibly overlapping) match. O(n + m)."""
    if not pattern:
        return []

    lps = compute_lps_array(pattern)
    matches = []
    i = j = 0

    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1

        if j == len(pattern):
            matches.append(i - j)
            j = lps[j - 1]
        elif i < len(text) and pattern[j] != text[i]:
            if j != 0:
                j = lps[j - 1]
            else:
                i += 1

    return matches


def rabin_karp(text: str, pattern: str) -> List[int]:
    """Rabin-Karp with a rolling hash. O(n + m) average, O(n*m) worst case."""
    m, n = len(pattern), len(text)
    if m == 0 or m > n:
        return []

    base, prime = RABIN_KARP_BASE, RABIN_KARP_PRIME
    pattern_hash = 0
    window_hash = 0
    for i in range(m):
        pattern_hash = (pattern_hash * base + ord(pattern[i])) % prime
        window_hash = (window_hash * base + ord(text[i])) % prime

    # Weight of the leading character in the window
    h = pow(base, m - 1, prime)

    matches = []
    for i in range(n - m + 1):
        # Equal hashes can collide, confirm character by character
        if pattern_hash == window_hash and text[i:i + m] == pattern:
            matches.append(i)

        if i < n - m:
            window_hash = (base * (window_hash - ord(text[i]) * h) + ord(text[i + m])) % prime

    return matches


def levenshtein_distance(s1: str, s2: str) -> int:
    """Minimum single-character insertions, deletions and substitutions. O(m*n)."""
    m, n = len(s1), len(s2)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i - 1] == s2[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],      # deletion
                    dp[i][j - 1],      # insertion
                    dp[i - 1][j - 1],  # substitution
                )

    return dp[m][n]


def longest_palindromic_substring(s: str) -> str:
    """Longest palindromic substring by DP over substring bounds. O(n^2)."""
    n = len(s)
    if n < 2:
        return s

    # table[i][j] is True when s[i..j] is a palindrome
    table = [[False] * n for _ in range(n)]
    for i in range(n):
        table[i][i] = True

    start, max_length = 0, 1

    for i in range(n - 1):
        if s[i] == s[i + 1]:
            table[i][i + 1] = True
            start, max_length = i, 2

    for length in range(3, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            if table[i + 1][j - 1] and s[i] == s[j]:
                table[i][j] = True
                if length > max_length:
                    start, max_length = i, length

    return s[start:start + max_length]


def main():
    text, pattern = "AABAACAADAABAAABAA", "AABA"
    print("KMP String Matching:")
    print(f"Text: {text}\nPattern: {pattern}")
    print(f"Pattern found at indices: {kmp_search(text, pattern)}\n")

    text, pattern = "GEEKS FOR GEEKS", "GEEK"
    print("Rabin-Karp String Matching:")
    print(f"Text: {text}\nPattern: {pattern}")
    print(f"Pattern found at indices: {rabin_karp(text, pattern)}\n")

    str1, str2 = "kitten", "sitting"
    print("Levenshtein Distance:")
    print(f"String 1: {str1}\nString 2: {str2}")
    print(f"Edit distance: {levenshtein_distance(str1, str2)}\n")

    text = "babad"
    print("Longest Palindromic Substring:")
    print(f"Text: {text}")
    print(f"Longest palindrome: {longest_palindromic_substring(text)}")


if __name__ == "__main__":
    main()
