"""Dictionary and word list loading."""

from collections.abc import Iterable, Iterator

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger
from tqdm import tqdm

from spellpy.core import strip_vowels
from spellpy.utils import Constants, expand_file_path


class Dictionary:
    """Read-only mapping of each word to its vowel-stripped form.

    Words are stored verbatim (no case folding). Duplicate words keep the
    position of their first occurrence; iteration follows build order.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        """Build the dictionary, deriving each vowel form from its word.

        Args:
            words: Words in build order (consumed once, never retained)
        """
        self._entries: dict[str, str] = {}
        for word in words:
            self._entries[word] = strip_vowels(word)

    @classmethod
    def from_words(cls, words: Iterable[str], verbose: bool = False) -> "Dictionary":
        """Build a dictionary from an ordered sequence of words.

        Args:
            words: Words in build order
            verbose: Whether to show a progress bar

        Returns:
            Dictionary instance
        """
        if verbose:
            words = tqdm(words, desc="  Building dictionary", unit="word", leave=False)
        return cls(words)

    def size(self) -> int:
        """Number of distinct words."""
        return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def contains_word(self, word: str) -> bool:
        """Exact, case-sensitive membership test."""
        return word in self._entries

    def entries(self) -> Iterator[tuple[str, str]]:
        """Yield (word, vowel_form) pairs in build order."""
        yield from self._entries.items()

    def words(self) -> Iterator[str]:
        """Yield words in build order."""
        yield from self._entries

    def vowel_form_of(self, word: str) -> str | None:
        """Return the stored vowel-stripped form of word, or None if absent."""
        return self._entries.get(word)


def load_word_list(filepath: str, verbose: bool = False) -> list[str]:
    """Load a word list file, one word per line.

    Line endings are removed and blank lines skipped; everything else,
    including case, is kept as written.
    """
    filepath = expand_file_path(filepath) or filepath
    words = []
    skipped = 0

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            for line in f:
                line = line.rstrip("\r\n")
                if not line:
                    skipped += 1
                    continue
                words.append(line)
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if verbose:
        logger.info(f"  Loaded {len(words)} words from {filepath}")
        if skipped:
            logger.info(f"  Skipped {skipped} blank lines")

    return words


def load_english_words(verbose: bool = False) -> list[str]:
    """Load the built-in English word list from the english-words package.

    The library returns a set, so the words are sorted to give a stable build order.
    """
    if verbose:
        logger.info("  Loading English words dictionary...")

    try:
        words: set[str] = get_english_words_set(list(Constants.ENGLISH_WORDS_SOURCES), lower=True)
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load English words list") from e

    if verbose:
        logger.info(f"  Loaded {len(words)} English words")

    return sorted(words)
