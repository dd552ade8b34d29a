import logging
from typing import Callable, Iterable, Iterator, Optional

from scrapple.core.letter_counts import is_alphabetic
from scrapple.core.matcher import AnagramIndex

logger = logging.getLogger(__name__)


class Dictionary:
    """Ordered, read-only word list. Words are uppercase A-Z only, first occurrence kept."""

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'Dictionary':
        """Create a dictionary from a word list without file I/O."""
        d = cls()
        for word in words:
            d._add(word)
        return d

    def __init__(self, open: Callable = open) -> None:
        self._open = open
        self._words: list[str] = []
        self._word_set: set[str] = set()
        self._index: Optional[AnagramIndex] = None

    def _add(self, token: str) -> None:
        word = token.strip().upper()
        if not is_alphabetic(word) or word in self._word_set:
            return
        self._words.append(word)
        self._word_set.add(word)
        self._index = None

    def read(self, dictionary_file: str) -> None:
        """Load whitespace-separated words; tokens that aren't purely A-Z are skipped."""
        skipped = 0
        with self._open(dictionary_file, "r") as f:
            for line in f:
                for token in line.split():
                    if is_alphabetic(token):
                        self._add(token)
                    else:
                        skipped += 1
        logger.info(f"Loaded {len(self._words)} words from {dictionary_file} ({skipped} skipped)")

    @property
    def words(self) -> list[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def is_word(self, word: str) -> bool:
        return word.upper() in self._word_set

    def index(self) -> AnagramIndex:
        if self._index is None:
            self._index = AnagramIndex(self._words)
        return self._index
