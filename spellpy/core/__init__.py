"""Core domain logic for SpellPy."""

from .config import Config, load_config
from .distance import levenshtein_distance
from .normalizer import is_letters_only, strip_vowels, to_lower
from .types import MatchResult, StageName

__all__ = [
    "Config",
    "MatchResult",
    "StageName",
    "is_letters_only",
    "levenshtein_distance",
    "load_config",
    "strip_vowels",
    "to_lower",
]
