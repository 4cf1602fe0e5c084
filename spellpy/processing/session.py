"""Interactive session: load the word list, then answer queries until EOF."""

from collections.abc import Callable, Iterable

from loguru import logger

from spellpy.core import Config
from spellpy.data import Dictionary, load_english_words, load_word_list
from spellpy.processing.query_service import QueryService
from spellpy.utils import Constants, file_exists

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def prompt_for_dictionary_path(
    input_fn: InputFn = input, prompt: str = Constants.DEFAULT_PROMPT
) -> str:
    """Ask for a word list path until an existing file is given.

    Raises:
        EOFError: If input ends before a valid path is entered
    """
    while True:
        path = input_fn(f"{Constants.FILE_PROMPT}\n{prompt}").strip()
        if file_exists(path):
            return path
        logger.error(f"Invalid file location/name: {path}")


def load_dictionary(
    config: Config,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> Dictionary:
    """Build the dictionary from the configured word source.

    Uses the configured file, the built-in English list, or asks the user for a path.
    """
    if config.english_words:
        words = load_english_words(config.verbose)
    else:
        path = config.dictionary or prompt_for_dictionary_path(input_fn, config.prompt)
        words = load_word_list(path, config.verbose)

    dictionary = Dictionary.from_words(words, verbose=config.verbose)
    output_fn(f"Dictionary has {dictionary.size()} words.")
    return dictionary


def answer_words(service: QueryService, words: Iterable[str], output_fn: OutputFn = print) -> None:
    """Answer a fixed batch of queries."""
    for word in words:
        output_fn(service.answer(word.strip()))


def run_interactive(
    service: QueryService,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    prompt: str = Constants.DEFAULT_PROMPT,
) -> None:
    """Prompt for words and print an answer for each until input ends."""
    output_fn(Constants.GREETING)
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            logger.info("Exiting program.")
            return
        output_fn(service.answer(line.strip()))
