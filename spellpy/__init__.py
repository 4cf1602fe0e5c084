"""SpellPy - dictionary lookup with fuzzy suggestions.

Resolve a word against a word list, returning the word itself or the single
best suggestion from a layered approximate-matching pipeline.
"""

from spellpy.core import Config, MatchResult, StageName, load_config
from spellpy.data import Dictionary
from spellpy.processing import MatchPipeline, QueryService
from spellpy.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "Config",
    "Dictionary",
    "MatchPipeline",
    "MatchResult",
    "QueryService",
    "StageName",
    "load_config",
    "setup_logger",
]
