"""Single entry point turning a raw query into a response string."""

from loguru import logger

from spellpy.core import is_letters_only
from spellpy.data import Dictionary
from spellpy.processing.pipeline import MatchPipeline
from spellpy.utils import Constants


class QueryService:
    """Validate queries and answer them from the match pipeline.

    Every input produces exactly one of: a validation message, a dictionary
    word, or the not-found message.
    """

    def __init__(self, dictionary: Dictionary, pipeline: MatchPipeline | None = None) -> None:
        self.dictionary = dictionary
        self.pipeline = pipeline or MatchPipeline(dictionary)

    def answer(self, raw: str) -> str:
        """Answer one query.

        Args:
            raw: Query as entered, already trimmed

        Returns:
            The matched word or a user-facing message
        """
        if not is_letters_only(raw):
            return Constants.MSG_LETTERS_ONLY

        if len(raw) < Constants.MIN_QUERY_LENGTH:
            return Constants.MSG_TOO_SHORT

        result = self.pipeline.run(raw)
        if result is None:
            return Constants.MSG_NOT_FOUND

        logger.info(f"Found {raw} in dictionary: {result.word} ({result.stage.value})")
        return result.word
