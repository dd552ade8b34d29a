"""Pick the highest scoring word a pool of letters can make."""
from dataclasses import dataclass
import logging
from typing import Callable, Iterable, Optional, Union

from scrapple.core.errors import NoCandidatesError
from scrapple.core.matcher import AnagramIndex, find_all
from scrapple.core.scorecard import calculate_score

logger = logging.getLogger(__name__)


def best_word(words: Iterable[str], score_fn: Callable[[str], int] = calculate_score) -> str:
    """
    Word with the highest score_fn value; the earliest one wins ties.
    Raises NoCandidatesError if words is empty.
    """
    it = iter(words)
    try:
        best = next(it)
    except StopIteration:
        raise NoCandidatesError("no candidate words to choose from") from None
    best_score = score_fn(best)
    for word in it:
        score = score_fn(word)
        if score > best_score:
            best, best_score = word, score
    return best


@dataclass
class Solution:
    letters: str
    words: list[str]  # every match, dictionary order
    best: str
    score: int


def solve(letters: str,
          dictionary: Union[AnagramIndex, Iterable[str]],
          min_length: int = 0,
          max_length: Optional[int] = None,
          score_fn: Callable[[str], int] = calculate_score) -> Optional[Solution]:
    """
    Every word buildable from letters plus the best of them, or None when
    nothing matches.
    """
    if isinstance(dictionary, AnagramIndex):
        matches = dictionary.find_all(letters)
    else:
        matches = find_all(letters, dictionary)
    matches = [w for w in matches
               if len(w) >= min_length and (max_length is None or len(w) <= max_length)]
    logger.debug(f"solve({letters}) -> {len(matches)} matches")
    if not matches:
        return None
    best = best_word(matches, score_fn)
    return Solution(letters, matches, best, score_fn(best))
