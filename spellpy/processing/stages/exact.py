"""Stage 1: exact lookup of the lowercased query."""

from spellpy.core import StageName, to_lower
from spellpy.processing.stages.base import MatchStage


class ExactMatchStage(MatchStage):
    """Return the lowercased query if it is stored verbatim in the dictionary.

    Only the query is lowercased, so words stored with capitals never match here.
    """

    name = StageName.EXACT

    def run(self, query: str) -> str | None:
        word = to_lower(query)
        if self.dictionary.contains_word(word):
            return word
        return None
