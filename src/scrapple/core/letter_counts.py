"""
Letter multisets as 26-slot frequency signatures.

A signature is a tuple of 26 counts, index 0 for 'A' through index 25 for 'Z'.
A word fits a pool when every slot of the word's signature is <= the pool's.
"""
from collections import Counter
import string
from typing import Iterable

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)
_ORD_A = ord('A')

LetterCounts = tuple[int, ...]

EMPTY_COUNTS: LetterCounts = (0,) * ALPHABET_SIZE


def _index(letter: str) -> int:
    """Slot for an A-Z letter in either case, -1 for anything else."""
    upper = letter.upper()
    if len(upper) == 1 and 'A' <= upper <= 'Z':
        return ord(upper) - _ORD_A
    return -1


def compute_signature(letters: Iterable[str]) -> LetterCounts:
    """
    Compute frequency signature from an iterable of characters.
    Case-insensitive; characters outside A-Z are ignored.
    """
    freq = [0] * ALPHABET_SIZE
    for c in letters:
        idx = _index(c)
        if idx >= 0:
            freq[idx] += 1
    return tuple(freq)


def is_alphabetic(word: str) -> bool:
    return word.isascii() and word.isalpha()


def fits(word_counts: LetterCounts, pool_counts: LetterCounts) -> bool:
    """True if word_counts is a sub-multiset of pool_counts."""
    return all(needed <= have for needed, have in zip(word_counts, pool_counts))


def can_make(word: str, pool_counts: LetterCounts) -> bool:
    """
    True if every letter of word is available in pool_counts, counting repeats.
    Costs O(len(word)); pool_counts is only read. Words containing anything
    other than A-Z never fit.
    """
    for idx, needed in Counter(_index(c) for c in word).items():
        if idx < 0 or needed > pool_counts[idx]:
            return False
    return True


def missing_letters(word: str, pool_counts: LetterCounts) -> str:
    """Letters of word (one per distinct letter, in word order) that pool_counts can't cover."""
    word_hash = Counter(c.upper() if _index(c) >= 0 else c for c in word)
    missing = []
    for letter, needed in word_hash.items():
        idx = _index(letter)
        if idx < 0 or needed > pool_counts[idx]:
            missing.append(letter)
    return "".join(missing)
