"""Find every dictionary word that can be built from a pool of letters."""
import logging
from typing import Iterable, Optional

from scrapple.core.letter_counts import LetterCounts, can_make, compute_signature, fits, is_alphabetic

logger = logging.getLogger(__name__)


def find_all(pool: str, words: Iterable[str]) -> list[str]:
    """
    Return the words, in their original order, whose letters are a
    sub-multiset of pool. No length limits apply. pool is never modified.
    """
    pool_counts = compute_signature(pool)
    return [word for word in words if can_make(word, pool_counts)]


class AnagramIndex:
    """
    Dictionary words paired with precomputed frequency signatures, so repeated
    searches skip re-counting every word.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._entries: list[tuple[str, Optional[LetterCounts]]] = [
            (word, compute_signature(word) if is_alphabetic(word) else None)
            for word in words
        ]
        logger.info(f"Built anagram index with {len(self._entries)} words")

    def __len__(self) -> int:
        return len(self._entries)

    def find_all(self, pool: str) -> list[str]:
        pool_counts = compute_signature(pool)
        pool_size = sum(pool_counts)
        return [
            word for word, counts in self._entries
            if counts is not None and len(word) <= pool_size and fits(counts, pool_counts)
        ]
