import logging
from typing import Optional

from scrapple.config import game_config

logger = logging.getLogger(__name__)

PLAYER = 0
COMPUTER = 1
PLAYER_NAMES = ["Player", "Computer"]


def has_double_letters(word: str) -> bool:
    """True if any two neighbouring characters are the same, e.g. the LL in BALL."""
    word = word.upper()
    return any(a == b for a, b in zip(word, word[1:]))


def calculate_score(word: str) -> int:
    """
    Scrabble letter values summed over the word, doubled once if the word has
    consecutive double letters. Characters without a value score nothing.
    """
    word = word.upper()
    score = sum(game_config.SCRABBLE_LETTER_SCORES.get(letter, 0) for letter in word)
    if has_double_letters(word):
        score *= 2
    return score


class ScoreCard:
    def __init__(self) -> None:
        self.totals: list[int] = [0] * len(PLAYER_NAMES)
        self.plays: list[tuple[int, str, int]] = []  # (player, word, score) in turn order

    def add_play(self, player: int, word: str) -> int:
        score = calculate_score(word)
        self.totals[player] += score
        self.plays.append((player, word, score))
        logger.info(f"{PLAYER_NAMES[player]} played {word} for {score}")
        return score

    def score(self, player: int) -> int:
        return self.totals[player]

    def leader(self) -> Optional[int]:
        """Player with the highest total, or None on a tie."""
        if self.totals[PLAYER] > self.totals[COMPUTER]:
            return PLAYER
        if self.totals[COMPUTER] > self.totals[PLAYER]:
            return COMPUTER
        return None
