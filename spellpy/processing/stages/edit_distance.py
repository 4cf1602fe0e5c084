"""Stage 2: nearest word by Levenshtein distance."""

from loguru import logger

from spellpy.core import StageName, levenshtein_distance
from spellpy.matching import select_best_candidate
from spellpy.processing.stages.base import MatchStage


class EditDistanceStage(MatchStage):
    """Find the closest word by edit distance, then check it with the letter gate.

    The first word reaching the minimum distance wins. The gate compares it
    against the query as typed (not lowercased).
    """

    name = StageName.EDIT_DISTANCE

    def _nearest_word(self, query: str) -> str | None:
        nearest = None
        min_distance = None
        for word in self.dictionary.words():
            distance = levenshtein_distance(query, word)
            if min_distance is None or distance < min_distance:
                min_distance = distance
                nearest = word
        if nearest is not None:
            logger.debug(f"Nearest word to {query!r}: {nearest!r} (distance {min_distance})")
        return nearest

    def run(self, query: str) -> str | None:
        nearest = self._nearest_word(query)
        if nearest is None:
            return None
        return select_best_candidate(query, [nearest])
