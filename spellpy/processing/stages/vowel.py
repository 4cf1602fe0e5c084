"""Stage 4: same-length words sharing the query's consonant skeleton."""

from spellpy.core import StageName, strip_vowels, to_lower
from spellpy.matching import select_best_candidate
from spellpy.processing.stages.base import MatchStage


class VowelStage(MatchStage):
    """Catch wrong vowels: candidates match the query once vowels are removed.

    Its candidates are a subset of the same-length stage's, so after that stage
    rejects a query this one rejects it too; it only adds matches when run alone.
    """

    name = StageName.VOWEL

    def run(self, query: str) -> str | None:
        query = to_lower(query)
        skeleton = strip_vowels(query)
        candidates = [
            word
            for word, vowel_form in self.dictionary.entries()
            if len(word) == len(query) and vowel_form == skeleton
        ]
        return select_best_candidate(query, candidates)
