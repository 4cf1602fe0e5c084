"""Base class for lookup stages."""

from abc import ABC, abstractmethod

from spellpy.core import StageName
from spellpy.data import Dictionary


class MatchStage(ABC):
    """One strategy for resolving a query against the dictionary.

    Stages never modify the dictionary. A stage either returns a word from
    the dictionary or None to hand the query to the next stage.
    """

    name: StageName

    def __init__(self, dictionary: Dictionary) -> None:
        """Initialize the stage.

        Args:
            dictionary: Dictionary to search
        """
        self.dictionary = dictionary

    @abstractmethod
    def run(self, query: str) -> str | None:
        """Try to resolve query.

        Args:
            query: Validated query (letters only, at least two characters)

        Returns:
            The matched dictionary word, or None if this stage found nothing
        """
