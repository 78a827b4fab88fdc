"""Dictionary backends used to check item names.

The allocator only needs one capability from a dictionary:
``is_correctly_spelled(word) -> bool``. Dictionaries are loaded once and
never modified afterwards, so one instance can be shared between calls.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from spellchecker import SpellChecker

from .config import DEFAULT_DICTIONARY_LANGUAGE

logger = logging.getLogger(__name__)


class SpellingDictionary(Protocol):
    """Anything that can tell whether a word is a dictionary word."""

    def is_correctly_spelled(self, word: str) -> bool:
        ...


class PySpellCheckerDictionary:
    """Dictionary backed by pyspellchecker's word frequency lists."""

    def __init__(
        self,
        language: str = DEFAULT_DICTIONARY_LANGUAGE,
        extra_words: Optional[Iterable[str]] = None,
    ):
        self.language = language
        self._checker = SpellChecker(language=language)
        if extra_words:
            self._checker.word_frequency.load_words(list(extra_words))
        logger.debug("Loaded pyspellchecker dictionary for language '%s'", language)

    def is_correctly_spelled(self, word: str) -> bool:
        return bool(self._checker.known([word]))


class WordListDictionary:
    """Dictionary built from an explicit set of words.

    Lookups are exact, so casing is preserved: "apple" is known when the list
    contains "apple", "Apple" is not.
    """

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def is_correctly_spelled(self, word: str) -> bool:
        return word in self._words

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "WordListDictionary":
        """Load a word list, one word per line.

        Blank lines and lines starting with '#' are skipped. Hunspell-style
        affix flags ("apple/SM") are stripped. A leading word count line, as
        found in .dic files, is ignored.
        """
        words = []
        with open(path, encoding="utf-8") as f:
            for line_no, line in enumerate(f):
                entry = line.strip()
                if not entry or entry.startswith("#"):
                    continue
                if line_no == 0 and entry.isdigit():
                    continue
                words.append(entry.split("/", 1)[0])

        logger.debug("Loaded %d words from %s", len(words), path)
        return cls(words)


def build_dictionary(config=None) -> SpellingDictionary:
    """Create the dictionary described by an AllocationConfig.

    A configured word list file wins over the pyspellchecker language.
    """
    if config is not None and config.word_list_path:
        return WordListDictionary.from_file(config.word_list_path)

    language = config.dictionary_language if config is not None else DEFAULT_DICTIONARY_LANGUAGE
    return PySpellCheckerDictionary(language=language)
