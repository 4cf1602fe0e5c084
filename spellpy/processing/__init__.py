"""Query processing: lookup stages, match pipeline and interactive session."""

from spellpy.processing.pipeline import MatchPipeline
from spellpy.processing.query_service import QueryService
from spellpy.processing.session import (
    answer_words,
    load_dictionary,
    prompt_for_dictionary_path,
    run_interactive,
)

__all__ = [
    "MatchPipeline",
    "QueryService",
    "answer_words",
    "load_dictionary",
    "prompt_for_dictionary_path",
    "run_interactive",
]
