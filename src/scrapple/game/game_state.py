"""Game state coordinating the pool, both hands, scoring and turn order."""

from dataclasses import dataclass
import logging
import random
from typing import Optional

from scrapple.core.dictionary import Dictionary
from scrapple.core.opponent import ComputerPlayer
from scrapple.core.scorecard import COMPUTER, PLAYER, ScoreCard, calculate_score
from scrapple.core.solver import Solution, solve
from scrapple.core.tiles import Hand, TilePool
from scrapple.core.validation import Play

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    player: int
    word: str
    verdict: Play
    score: int = 0


class Game:
    """Coordinates one game between the player and the computer.

    The player moves first each round. A rejected player word ends the game,
    as does running out of pool tiles or player tiles.
    """

    def __init__(self,
                 pool: TilePool,
                 player_hand: Hand,
                 computer_hand: Hand,
                 computer: ComputerPlayer,
                 dictionary: Optional[Dictionary] = None,
                 score_card: Optional[ScoreCard] = None,
                 game_logger=None) -> None:
        self.pool = pool
        self.hands = [player_hand, computer_hand]
        self.computer = computer
        self.dictionary = dictionary
        self.score_card = score_card or ScoreCard()
        self.game_logger = game_logger
        self.aborted = False

    @classmethod
    def new(cls, rng: random.Random, dictionary: Optional[Dictionary] = None,
            game_logger=None, tiles: Optional[str] = None) -> 'Game':
        """Fresh pool, player dealt first, then the computer."""
        pool = TilePool(tiles, rng)
        player_hand = Hand.deal(pool)
        computer_hand = Hand.deal(pool)
        return cls(pool, player_hand, computer_hand, ComputerPlayer(rng),
                   dictionary=dictionary, game_logger=game_logger)

    @property
    def player_hand(self) -> Hand:
        return self.hands[PLAYER]

    @property
    def computer_hand(self) -> Hand:
        return self.hands[COMPUTER]

    @property
    def strict(self) -> bool:
        return self.dictionary is not None

    def _record(self, result: TurnResult) -> TurnResult:
        if self.game_logger:
            self.game_logger.log_word_played(result.player, result.word, result.score, result.verdict.name)
        return result

    def play_player_word(self, word: str) -> TurnResult:
        word = word.strip().upper()
        verdict = self.player_hand.check(word)
        if verdict is Play.GOOD and self.strict and not self.dictionary.is_word(word):
            verdict = Play.BAD_WORD
        if verdict is not Play.GOOD:
            logger.info(f"player word {word} rejected: {verdict.name}")
            self.aborted = True
            return self._record(TurnResult(PLAYER, word, verdict))

        score = self.score_card.add_play(PLAYER, word)
        self.player_hand.play(word)
        return self._record(TurnResult(PLAYER, word, verdict, score))

    def play_computer_turn(self) -> TurnResult:
        word = self.computer.take_turn(self.computer_hand)
        score = self.score_card.add_play(COMPUTER, word)
        return self._record(TurnResult(COMPUTER, word, Play.GOOD, score))

    def is_over(self) -> bool:
        return self.aborted or self.pool.is_empty() or len(self.player_hand) == 0

    def winner(self) -> Optional[int]:
        return self.score_card.leader()

    def hint(self) -> Optional[Solution]:
        """Best dictionary word the player could play right now."""
        if not self.strict:
            return None
        validator = self.player_hand.validator
        return solve(self.player_hand.letters(), self.dictionary.index(),
                     min_length=validator.min_length, max_length=validator.max_length,
                     score_fn=calculate_score)

    def finish(self) -> None:
        if self.game_logger:
            self.game_logger.log_game_over(self.score_card.score(PLAYER),
                                           self.score_card.score(COMPUTER),
                                           self.winner())
