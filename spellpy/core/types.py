"""Type definitions for SpellPy."""

from enum import Enum

from pydantic import BaseModel


class StageName(Enum):
    """Lookup stages, in the order the pipeline tries them."""

    EXACT = "exact"  # Lowercased query is a dictionary word
    EDIT_DISTANCE = "edit_distance"  # Nearest word by Levenshtein distance
    SAME_LENGTH = "same_length"  # Words with the query's length
    VOWEL = "vowel"  # Same length and same consonant skeleton


class MatchResult(BaseModel):
    """Word chosen by the pipeline and the stage that found it."""

    word: str
    stage: StageName

    model_config = {"frozen": True}
