from enum import Enum
import logging
from typing import Protocol

from scrapple.config import game_config
from scrapple.core.letter_counts import LetterCounts, can_make

logger = logging.getLogger(__name__)

Play = Enum("Play", ["GOOD", "TOO_SHORT", "TOO_LONG", "MISSING_LETTERS", "BAD_WORD"])


class HasLetterCounts(Protocol):
    def counts(self) -> LetterCounts: ...


class WordValidator:
    """Checks a word's length and that a hand holds every letter it needs.

    Never mutates the hand; the same inputs always give the same verdict.
    """

    def __init__(self,
                 min_length: int = game_config.MIN_WORD_LENGTH,
                 max_length: int = game_config.MAX_WORD_LENGTH) -> None:
        self.min_length = min_length
        self.max_length = max_length

    def check(self, word: str, hand: HasLetterCounts) -> Play:
        if len(word) < self.min_length:
            return Play.TOO_SHORT
        if len(word) > self.max_length:
            return Play.TOO_LONG
        if not can_make(word, hand.counts()):
            return Play.MISSING_LETTERS
        return Play.GOOD

    def is_valid(self, word: str, hand: HasLetterCounts) -> bool:
        verdict = self.check(word, hand)
        logger.debug(f"is_valid({word}) -> {verdict.name}")
        return verdict is Play.GOOD


_default_validator = WordValidator()


def is_valid(word: str, hand: HasLetterCounts) -> bool:
    return _default_validator.is_valid(word, hand)
