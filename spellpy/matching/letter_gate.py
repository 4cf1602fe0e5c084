"""Matching-letter gate: picks one candidate by position-wise letter matches.

A candidate's score is the number of positions where it has the same
character as the query, counted up to the shorter of the two lengths.
The best score must reach half the query length (rounded down), otherwise
the gate rejects every candidate. Ties go to the earliest candidate.
"""

from collections.abc import Sequence

from loguru import logger


def count_matching_letters(query: str, candidate: str) -> int:
    """Count positions where query and candidate share the same character."""
    return sum(1 for q_char, c_char in zip(query, candidate) if q_char == c_char)


def select_best_candidate(query: str, candidates: Sequence[str]) -> str | None:
    """Return the first top-scoring candidate, or None if the gate rejects.

    Args:
        query: The word being looked up
        candidates: Candidate words in build order

    Returns:
        The accepted candidate, or None when there are no candidates or the
        best score is below len(query) // 2
    """
    if not candidates:
        return None

    scores = [count_matching_letters(query, candidate) for candidate in candidates]
    best = max(scores)

    logger.debug(f"Number of matching letters: {best}")

    if best < len(query) // 2:
        return None

    return candidates[scores.index(best)]
