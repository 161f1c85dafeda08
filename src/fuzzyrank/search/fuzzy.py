from __future__ import annotations


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Fills a (len(b) + 1) x (len(a) + 1) cost matrix where row 0 and column 0
    hold the cost of building each prefix from the empty string.
    """
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(a) + 1):
        matrix[0][i] = i
    for j in range(len(b) + 1):
        matrix[j][0] = j

    for j in range(1, len(b) + 1):
        for i in range(1, len(a) + 1):
            indicator = 0 if a[i - 1] == b[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,  # deletion
                matrix[j - 1][i] + 1,  # insertion
                matrix[j - 1][i - 1] + indicator,  # substitution
            )

    return matrix[len(b)][len(a)]


def similarity(a: str, b: str) -> float:
    """Similarity score (0.0 to 1.0) derived from edit distance; two empty strings score 1.0."""
    longer, shorter = (a, b) if len(a) > len(b) else (b, a)
    if len(longer) == 0:
        return 1.0
    distance = edit_distance(longer, shorter)
    return (len(longer) - distance) / len(longer)
