"""Data loading and management for SpellPy."""

from spellpy.data.dictionary import Dictionary, load_english_words, load_word_list

__all__ = [
    "Dictionary",
    "load_english_words",
    "load_word_list",
]
