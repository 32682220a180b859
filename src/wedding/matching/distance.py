"""Levenshtein edit distance."""


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Calculate Levenshtein edit distance between two strings.

    Uses the full (len(s1)+1) x (len(s2)+1) table with unit cost for
    insertions, deletions and substitutions.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Number of edits needed to turn s1 into s2
    """
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
                    dp[i - 1][j],  # deletion
                    dp[i][j - 1],  # insertion
                    dp[i - 1][j - 1],  # substitution
                )

    return dp[m][n]


def similarity(s1: str, s2: str) -> float:
    """
    Edit-distance similarity on a 0-100 scale.

    Args:
        s1: First string
        s2: Second string

    Returns:
        100 for identical strings, 0 for completely different ones
        (and for two empty strings)
    """
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 0.0

    return (1 - levenshtein_distance(s1, s2) / max_len) * 100
