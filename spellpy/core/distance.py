"""Levenshtein edit distance."""


def levenshtein_distance(first: str, second: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Insertion, deletion and substitution each cost 1. Uses the full
    (len(first) + 1) x (len(second) + 1) dynamic-programming table.

    Args:
        first: First string
        second: Second string

    Returns:
        Minimum number of single-character edits turning first into second
    """
    rows = len(first) + 1
    cols = len(second) + 1
    table = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        table[i][0] = i
    for j in range(1, cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            substitution_cost = 0 if first[i - 1] == second[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,  # deletion
                table[i][j - 1] + 1,  # insertion
                table[i - 1][j - 1] + substitution_cost,
            )

    return table[rows - 1][cols - 1]
