"""
Core game logic for the tile pool and player hands.

TERMINOLOGY:
- Tile: a single letter drawn from the pool.
  - Represented as a one-character uppercase string.

- Pool: the shared reservoir of undrawn tiles (TilePool)
  - Starts with the 100 tiles of game_config.TILE_DISTRIBUTION
  - Only ever shrinks; a drawn tile never goes back

- Hand: the tiles one player currently holds (Hand)
  - Holds at most `capacity` tiles (game_config.NUM_TILES)
  - After a play the hand is topped up from its pool, so it only drops
    below capacity once the pool runs dry

Order of tiles inside a pool or hand carries no meaning; only the multiset
of letters matters.
"""
import logging
import random
from typing import Optional

from scrapple.config import game_config
from scrapple.core import letter_counts
from scrapple.core.errors import InvalidWordError
from scrapple.core.letter_counts import LetterCounts
from scrapple.core.validation import Play, WordValidator

logger = logging.getLogger(__name__)

NUM_TILES = game_config.NUM_TILES


def full_pool_letters() -> str:
    """Every tile of the starting pool, alphabetically."""
    return "".join(letter * count for letter, count in game_config.TILE_DISTRIBUTION.items())


def draw_letters(letters: list[str], n: int, rng: random.Random) -> str:
    """
    Remove up to n letters from `letters` in place, each one picked uniformly
    among the letters still left, and return them in draw order.
    """
    drawn = []
    for _ in range(min(n, len(letters))):
        index = rng.randrange(len(letters))
        drawn.append(letters.pop(index))
    return "".join(drawn)


class TilePool:
    def __init__(self, tiles: Optional[str] = None, rng: Optional[random.Random] = None) -> None:
        self._tiles = list((full_pool_letters() if tiles is None else tiles).upper())
        self._rng = rng or random.Random()

    def __repr__(self) -> str:
        return f"TilePool({self.letters()!r})"

    def __len__(self) -> int:
        return len(self._tiles)

    def size(self) -> int:
        return len(self._tiles)

    def is_empty(self) -> bool:
        return not self._tiles

    def letters(self) -> str:
        return "".join(sorted(self._tiles))

    def draw(self, n: int) -> str:
        """
        Draw up to n tiles without replacement. Each tile still in the pool is
        equally likely, so common letters come up more often. Asking for more
        tiles than remain returns whatever is left.
        """
        drawn = draw_letters(self._tiles, n, self._rng)
        logger.debug(f"draw({n}) -> {drawn}, {len(self._tiles)} left")
        return drawn


class Hand:
    def __init__(self, letters: str = "", pool: Optional[TilePool] = None,
                 capacity: int = NUM_TILES, validator: Optional[WordValidator] = None) -> None:
        if len(letters) > capacity:
            raise ValueError(f"{len(letters)} letters exceed hand capacity {capacity}")
        self._letters = list(letters.upper())
        self._pool = pool
        self.capacity = capacity
        self.validator = validator or WordValidator(max_length=capacity)

    @classmethod
    def deal(cls, pool: TilePool, capacity: int = NUM_TILES) -> 'Hand':
        """Create a hand holding `capacity` tiles fresh from the pool."""
        hand = cls("", pool, capacity)
        hand.refill()
        return hand

    def __repr__(self) -> str:
        return f"Hand({self.letters()!r}, capacity={self.capacity})"

    def __len__(self) -> int:
        return len(self._letters)

    def letters(self) -> str:
        return "".join(self._letters)

    def counts(self) -> LetterCounts:
        return letter_counts.compute_signature(self._letters)

    def missing_letters(self, word: str) -> str:
        return letter_counts.missing_letters(word, self.counts())

    def check(self, word: str) -> Play:
        return self.validator.check(word.upper(), self)

    def remove(self, word: str) -> None:
        """Take one tile per letter of word out of the hand (no length rules)."""
        word = word.upper()
        missing = self.missing_letters(word)
        if missing:
            raise InvalidWordError(word, f"missing letters {missing}")
        for letter in word:
            self._letters.remove(letter)

    def refill(self) -> str:
        """Top the hand up to capacity from the pool; returns the tiles drawn."""
        if self._pool is None:
            return ""
        drawn = self._pool.draw(self.capacity - len(self._letters))
        self._letters.extend(drawn)
        return drawn

    def play(self, word: str) -> str:
        """
        Play word from this hand and refill. Raises InvalidWordError, leaving
        the hand untouched, if the word fails validation.
        """
        word = word.upper()
        verdict = self.check(word)
        if verdict is not Play.GOOD:
            raise InvalidWordError(word, verdict.name.lower().replace("_", " "))
        logger.info(f"play({word}) from {self.letters()}")
        self.remove(word)
        return self.refill()
