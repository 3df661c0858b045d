"""Test the spell-check pass."""

import pytest

from src.dictionary import WordIndex
from src.speller import spell_check, extract_words, SpellerConfig


DICTIONARY = ["the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog", "don't"]
TEXT = "The quick brown fox jumps over the lazy dog. Th3 foxx don't 42"


class TestExtractWords:
    """Test cases for text tokenizing."""

    def test_plain_sentence(self):
        """Words are split on punctuation and whitespace."""
        assert list(extract_words("Hello, world! It's fine.")) == ["Hello", "world", "It's", "fine"]

    def test_digits_skip_whole_run(self):
        """Runs with digits are skipped entirely."""
        assert list(extract_words("abc123 123abc 42 ok")) == ["ok"]

    def test_leading_apostrophe_dropped(self):
        """A word cannot start with an apostrophe."""
        assert list(extract_words("'quoted")) == ["quoted"]

    def test_underscore_separates(self):
        """Underscores are not part of words."""
        assert list(extract_words("snake_case")) == ["snake", "case"]

    def test_overlong_skipped(self):
        """Runs over the maximum length are skipped."""
        assert list(extract_words("a" * 46 + " short")) == ["short"]
        assert list(extract_words("abcd ab", max_length=3)) == ["ab"]


class TestSpellCheck:
    """Test cases for the spell-check pass."""

    def test_loads_checks_and_unloads(self):
        """Pass with a dictionary loads, reports and unloads."""
        index = WordIndex()
        report = spell_check(index, TEXT, dictionary=DICTIONARY)

        assert report.misspelled == ["foxx"]
        assert report.words_misspelled == 1
        assert report.words_in_text == 11
        assert report.words_in_dictionary == 9
        assert index.state == "unloaded"
        assert report.time_total >= 0

    def test_preloaded_index_left_loaded(self):
        """Pass over an already loaded index leaves it loaded."""
        index = WordIndex()
        index.load(DICTIONARY)
        report = spell_check(index, "fox foxx foxx")

        assert report.misspelled == ["foxx", "foxx"]
        assert report.time_load == 0.0
        assert report.time_unload == 0.0
        assert index.state == "loaded"

    def test_dictionary_path_recorded(self, tmp_path):
        """Dictionary path is reported."""
        path = tmp_path / "small"
        path.write_text("\n".join(DICTIONARY), encoding="utf-8")
        report = spell_check(WordIndex(), "dog", dictionary=path)
        assert report.dictionary == str(path)
        assert report.misspelled == []

    def test_missing_dictionary(self, tmp_path):
        """Unloadable dictionary raises RuntimeError."""
        with pytest.raises(RuntimeError, match="Could not load dictionary"):
            spell_check(WordIndex(), TEXT, dictionary=tmp_path / "missing")

    def test_empty_text(self):
        """Empty text has no words and no misspellings."""
        report = spell_check(WordIndex(), "", dictionary=DICTIONARY)
        assert report.words_in_text == 0
        assert report.misspelled == []


class TestSpellerConfig:
    """Test cases for speller configuration."""

    def test_defaults(self):
        """Defaults match the index defaults."""
        config = SpellerConfig()
        index_config = config.index_config()
        assert index_config.bucket_count == 28
        assert index_config.max_length == 45
        assert index_config.hash_name == "additive"
        assert index_config.unique is False

    def test_index_config_carries_values(self):
        """Index parameters are passed through."""
        config = SpellerConfig(bucket_count=101, hash_name="blake2b", unique=True)
        index_config = config.index_config()
        assert index_config.bucket_count == 101
        assert index_config.hash_name == "blake2b"
        assert index_config.unique is True
