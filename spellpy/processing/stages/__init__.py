"""Lookup stages, tried in order by the match pipeline."""

from .base import MatchStage
from .edit_distance import EditDistanceStage
from .exact import ExactMatchStage
from .same_length import SameLengthStage
from .vowel import VowelStage

# Order in which the pipeline tries the stages
DEFAULT_STAGES: tuple[type[MatchStage], ...] = (
    ExactMatchStage,
    EditDistanceStage,
    SameLengthStage,
    VowelStage,
)

__all__ = [
    "DEFAULT_STAGES",
    "EditDistanceStage",
    "ExactMatchStage",
    "MatchStage",
    "SameLengthStage",
    "VowelStage",
]
