"""
The computer's word choice.

The computer does not search the dictionary. It picks a random length from
COMPUTER_MIN_WORD_LENGTH to COMPUTER_MAX_WORD_LENGTH (capped at its hand size)
and draws that many of its own tiles at random. Its "word" is therefore always
made of letters it holds but is rarely a real word, and it is never checked the
way the player's words are.
"""
import logging
import random
from typing import Optional

from scrapple.config import game_config
from scrapple.core.tiles import Hand, draw_letters

logger = logging.getLogger(__name__)


class ComputerPlayer:
    def __init__(self, rng: Optional[random.Random] = None,
                 min_length: int = game_config.COMPUTER_MIN_WORD_LENGTH,
                 max_length: int = game_config.COMPUTER_MAX_WORD_LENGTH) -> None:
        self._rng = rng or random.Random()
        self.min_length = min_length
        self.max_length = max_length

    def make_word(self, hand: Hand) -> str:
        length = min(self._rng.randint(self.min_length, self.max_length), len(hand))
        word = draw_letters(list(hand.letters()), length, self._rng)
        logger.debug(f"make_word({hand.letters()}) -> {word}")
        return word

    def take_turn(self, hand: Hand) -> str:
        """Make a word, take its tiles out of the hand and refill."""
        word = self.make_word(hand)
        hand.remove(word)
        hand.refill()
        return word
