"""Unit tests for the match pipeline - focusing on stage fallthrough."""

from spellpy.core import MatchResult, StageName
from spellpy.data import Dictionary
from spellpy.processing import MatchPipeline
from spellpy.processing.stages import VowelStage


class TestMatchPipeline:
    """Tests for stage ordering and fallthrough."""

    def test_exact_match_stops_at_first_stage(self):
        """A stored word is resolved by exact lookup."""
        pipeline = MatchPipeline(Dictionary.from_words(["cat", "dog"]))
        assert pipeline.run("cat") == MatchResult(word="cat", stage=StageName.EXACT)

    def test_nearest_word_resolved_by_edit_distance(self):
        """A transposition is fixed by the edit distance stage."""
        pipeline = MatchPipeline(Dictionary.from_words(["cat", "bat", "hat"]))
        assert pipeline.run("cta") == MatchResult(word="cat", stage=StageName.EDIT_DISTANCE)

    def test_falls_through_to_same_length_when_gate_rejects(self):
        """Rejected nearest word hands over to the same-length stage."""
        pipeline = MatchPipeline(Dictionary.from_words(["bcd", "abzz"]))
        assert pipeline.run("abcd") == MatchResult(word="abzz", stage=StageName.SAME_LENGTH)

    def test_returns_none_when_every_stage_fails(self):
        """No acceptable candidate anywhere gives None."""
        pipeline = MatchPipeline(Dictionary.from_words(["xyz"]))
        assert pipeline.run("ab") is None

    def test_empty_dictionary_returns_none(self):
        """Nothing to match against gives None."""
        assert MatchPipeline(Dictionary.from_words([])).run("hello") is None

    def test_custom_stage_list(self):
        """Pipelines can run a chosen subset of stages."""
        dictionary = Dictionary.from_words(["beat"])
        pipeline = MatchPipeline(dictionary, stages=[VowelStage(dictionary)])
        assert pipeline.run("boot") == MatchResult(word="beat", stage=StageName.VOWEL)

    def test_does_not_modify_dictionary(self):
        """Running queries leaves the dictionary entries untouched."""
        dictionary = Dictionary.from_words(["cat", "beat", "abzz"])
        before = list(dictionary.entries())
        pipeline = MatchPipeline(dictionary)
        for query in ("cat", "cta", "boot", "abcd", "zzzz"):
            pipeline.run(query)
        assert list(dictionary.entries()) == before
