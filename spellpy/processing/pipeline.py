"""Match pipeline orchestration."""

from collections.abc import Sequence

from loguru import logger

from spellpy.core import MatchResult
from spellpy.data import Dictionary
from spellpy.processing.stages import DEFAULT_STAGES, MatchStage


class MatchPipeline:
    """Runs lookup stages in order and stops at the first one that finds a word."""

    def __init__(
        self,
        dictionary: Dictionary,
        stages: Sequence[MatchStage] | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            dictionary: Dictionary shared by all stages
            stages: Stages to run in order (defaults to exact, edit distance,
                same length, vowel)
        """
        self.dictionary = dictionary
        if stages is None:
            stages = [stage_cls(dictionary) for stage_cls in DEFAULT_STAGES]
        self.stages = list(stages)

    def run(self, query: str) -> MatchResult | None:
        """Resolve a validated query.

        Args:
            query: Letters-only query of at least two characters

        Returns:
            The first stage's match, or None if every stage came up empty
        """
        for stage in self.stages:
            word = stage.run(query)
            if word is not None:
                return MatchResult(word=word, stage=stage.name)
            logger.debug(f"  {stage.name.value}: no match for {query!r}")
        return None
