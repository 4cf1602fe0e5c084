"""Candidate scoring shared by the lookup stages."""

from spellpy.matching.letter_gate import count_matching_letters, select_best_candidate

__all__ = [
    "count_matching_letters",
    "select_best_candidate",
]
