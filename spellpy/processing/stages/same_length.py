"""Stage 3: words with the same length as the query."""

from spellpy.core import StageName, to_lower
from spellpy.matching import select_best_candidate
from spellpy.processing.stages.base import MatchStage


class SameLengthStage(MatchStage):
    """Score every word of the query's length; catches misplaced letters."""

    name = StageName.SAME_LENGTH

    def run(self, query: str) -> str | None:
        query = to_lower(query)
        candidates = [word for word in self.dictionary.words() if len(word) == len(query)]
        return select_best_candidate(query, candidates)
