"""String normalization helpers used by the matching stages."""

import re

from spellpy.utils.constants import Constants

_LETTERS_ONLY = re.compile(r"[a-zA-Z]*")
_VOWELS = re.compile(f"[{Constants.VOWELS}]")


def is_letters_only(text: str) -> bool:
    """Return True if every character is an ASCII letter.

    The empty string counts as letters-only; length checks are the caller's job.
    """
    return _LETTERS_ONLY.fullmatch(text) is not None


def to_lower(text: str) -> str:
    """Lowercase a query."""
    return text.lower()


def strip_vowels(text: str) -> str:
    """Remove all vowels (including 'y') in either case, keeping the other characters in order."""
    return _VOWELS.sub("", text)
