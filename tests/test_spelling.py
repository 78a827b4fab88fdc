"""Tests for the dictionary backends."""

import pytest

from core.models import AllocationConfig
from core.spelling import (
    PySpellCheckerDictionary,
    WordListDictionary,
    build_dictionary,
)


class TestWordListDictionary:
    """Exact-match word list dictionary."""

    def test_known_and_unknown_words(self):
        dictionary = WordListDictionary(["apple", "banana"])

        assert dictionary.is_correctly_spelled("apple")
        assert not dictionary.is_correctly_spelled("bnna")

    def test_lookup_is_case_sensitive(self):
        dictionary = WordListDictionary(["apple"])

        assert not dictionary.is_correctly_spelled("Apple")

    def test_from_file_skips_comments_and_flags(self, tmp_path):
        word_file = tmp_path / "en_US.dic"
        word_file.write_text(
            "4\n"
            "# fruit catalogue\n"
            "apple/SM\n"
            "\n"
            "banana\n"
            "  cherry  \n"
            "pear/S\n",
            encoding="utf-8",
        )

        dictionary = WordListDictionary.from_file(word_file)

        assert len(dictionary) == 4
        for word in ("apple", "banana", "cherry", "pear"):
            assert word in dictionary
        assert "4" not in dictionary

    def test_from_file_missing_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            WordListDictionary.from_file(tmp_path / "missing.txt")


class TestPySpellCheckerDictionary:
    """Default English dictionary."""

    @pytest.fixture(scope="class")
    def english(self):
        return PySpellCheckerDictionary(language="en")

    def test_common_fruit_is_known(self, english):
        assert english.is_correctly_spelled("apple")
        assert english.is_correctly_spelled("banana")

    def test_misspelling_is_unknown(self, english):
        assert not english.is_correctly_spelled("qzxbnna")

    def test_extra_words(self):
        dictionary = PySpellCheckerDictionary(extra_words=["xqzfruit"])

        assert dictionary.is_correctly_spelled("xqzfruit")


class TestBuildDictionary:
    """build_dictionary picks the backend from the config."""

    def test_word_list_path_wins(self, tmp_path):
        word_file = tmp_path / "words.txt"
        word_file.write_text("apple\n", encoding="utf-8")

        dictionary = build_dictionary(AllocationConfig(word_list_path=str(word_file)))

        assert isinstance(dictionary, WordListDictionary)
        assert dictionary.is_correctly_spelled("apple")

    def test_default_is_pyspellchecker(self):
        dictionary = build_dictionary(AllocationConfig())

        assert isinstance(dictionary, PySpellCheckerDictionary)
        assert dictionary.language == "en"
