"""Unit tests for the dictionary and word list loading.

Each test has a single assertion and focuses on behavior.
"""

from unittest.mock import MagicMock, patch

import pytest

from spellpy.data import Dictionary, load_english_words, load_word_list


class TestDictionary:
    """Test Dictionary behavior."""

    def test_size_counts_words(self) -> None:
        """Size is the number of words supplied."""
        assert Dictionary.from_words(["cat", "dog"]).size() == 2

    def test_len_matches_size(self) -> None:
        """len() reports the same count as size()."""
        assert len(Dictionary.from_words(["cat", "dog", "bat"])) == 3

    def test_duplicates_are_stored_once(self) -> None:
        """Repeated words overwrite instead of adding entries."""
        assert Dictionary.from_words(["cat", "dog", "cat"]).size() == 2

    def test_duplicates_keep_first_position(self) -> None:
        """A repeated word keeps the position of its first occurrence."""
        dictionary = Dictionary.from_words(["cat", "dog", "cat"])
        assert list(dictionary.words()) == ["cat", "dog"]

    def test_entries_pair_words_with_vowel_forms(self) -> None:
        """Entries yield (word, vowel_form) in build order."""
        dictionary = Dictionary.from_words(["cat", "dog"])
        assert list(dictionary.entries()) == [("cat", "ct"), ("dog", "dg")]

    def test_stores_words_verbatim(self) -> None:
        """Capitalized words are stored as supplied."""
        assert Dictionary.from_words(["Apple"]).contains_word("Apple")

    def test_membership_is_case_sensitive(self) -> None:
        """A differently cased query is not contained."""
        assert not Dictionary.from_words(["cat"]).contains_word("Cat")

    def test_vowel_form_of_known_word(self) -> None:
        """Vowel form is computed at build time."""
        assert Dictionary.from_words(["beat"]).vowel_form_of("beat") == "bt"

    def test_vowel_form_of_unknown_word_is_none(self) -> None:
        """Unknown words have no vowel form."""
        assert Dictionary.from_words(["beat"]).vowel_form_of("boot") is None

    def test_builds_with_progress_bar_when_verbose(self) -> None:
        """Verbose build produces the same dictionary."""
        assert Dictionary.from_words(["cat", "dog"], verbose=True).size() == 2

    def test_empty_word_list_builds_empty_dictionary(self) -> None:
        """No words means an empty dictionary."""
        assert Dictionary.from_words([]).size() == 0

    def test_constructor_derives_vowel_forms(self) -> None:
        """Vowel forms always come from the words, whatever mapping is passed in."""
        assert Dictionary({"cat": "zzz"}).vowel_form_of("cat") == "ct"

    def test_source_changes_after_build_do_not_leak_in(self) -> None:
        """Changing the source list after building leaves the dictionary unchanged."""
        words = ["cat"]
        dictionary = Dictionary(words)
        words.append("dog")
        assert dictionary.size() == 1


class TestLoadWordList:
    """Test load_word_list behavior."""

    def test_loads_words_in_file_order(self, tmp_path) -> None:
        """Words are returned in the order they appear."""
        word_file = tmp_path / "words.dict"
        word_file.write_text("dog\ncat\n")
        assert load_word_list(str(word_file)) == ["dog", "cat"]

    def test_skips_blank_lines(self, tmp_path) -> None:
        """Blank lines do not become words."""
        word_file = tmp_path / "words.dict"
        word_file.write_text("cat\n\n\ndog\n")
        assert load_word_list(str(word_file)) == ["cat", "dog"]

    def test_keeps_case(self, tmp_path) -> None:
        """Words are not lowercased."""
        word_file = tmp_path / "words.dict"
        word_file.write_text("Apple\n")
        assert load_word_list(str(word_file)) == ["Apple"]

    def test_removes_windows_line_endings(self, tmp_path) -> None:
        """CRLF endings are stripped."""
        word_file = tmp_path / "words.dict"
        word_file.write_bytes(b"cat\r\ndog\r\n")
        assert load_word_list(str(word_file)) == ["cat", "dog"]

    def test_raises_when_file_missing(self, tmp_path) -> None:
        """Missing file is reported and re-raised."""
        with pytest.raises(FileNotFoundError):
            load_word_list(str(tmp_path / "missing.dict"))

    def test_raises_on_invalid_encoding(self, tmp_path) -> None:
        """Non UTF-8 files are rejected."""
        word_file = tmp_path / "words.dict"
        word_file.write_bytes(b"caf\xe9\n")
        with pytest.raises(UnicodeDecodeError):
            load_word_list(str(word_file))


class TestLoadEnglishWords:
    """Test load_english_words behavior."""

    @patch("spellpy.data.dictionary.get_english_words_set")
    def test_returns_sorted_words(self, mock_get_words: MagicMock) -> None:
        """Library set is returned in a stable sorted order."""
        mock_get_words.return_value = {"dog", "cat", "bat"}
        assert load_english_words() == ["bat", "cat", "dog"]

    @patch("spellpy.data.dictionary.get_english_words_set")
    def test_requests_lowercase_web2_list(self, mock_get_words: MagicMock) -> None:
        """The web2 list is requested in lower case."""
        mock_get_words.return_value = set()
        load_english_words()
        mock_get_words.assert_called_once_with(["web2"], lower=True)

    @patch("spellpy.data.dictionary.get_english_words_set")
    def test_raises_runtime_error_when_library_fails(self, mock_get_words: MagicMock) -> None:
        """When english-words library fails, raises RuntimeError."""
        mock_get_words.side_effect = Exception("Library error")
        with pytest.raises(RuntimeError, match="Failed to load English words list"):
            load_english_words()
