#!/usr/bin/env python3

import argparse
from datetime import datetime
import logging
import random
import sys
from typing import Callable, Optional

from scrapple.config import game_config
from scrapple.config.game_params import GameParams
from scrapple.core.dictionary import Dictionary
from scrapple.core.scorecard import COMPUTER, PLAYER, has_double_letters
from scrapple.core.tiles import full_pool_letters
from scrapple.core.validation import Play
from scrapple.game.game_state import Game
from scrapple.game_logging.game_loggers import GameLogger

logger = logging.getLogger(__name__)

BANNER = r"""
 _______     _______     ______     ______     ______    ______   __          _______
/\   ___\   /\  ____\   /\  == \   /\  __ \   /\  == \  /\  == \ /\ \        /\  ____\
\ \___   \  \ \ \____   \ \  __<   \ \  __ \  \ \  _-/  \ \  _-/ \ \ \_____  \ \  __\
 \/\______\  \ \______\  \ \_\ \_\  \ \_\ \_\  \ \_\     \ \_\    \ \______\  \ \______\
  \/______/   \/______/   \/_/ /_/   \/_/\/_/   \/_/      \/_/     \/______/   \/______/ TM
"""

REJECTION_MESSAGES = {
    Play.TOO_SHORT: f"Words need at least {game_config.MIN_WORD_LENGTH} letters.",
    Play.TOO_LONG: f"Words can't be longer than {game_config.NUM_TILES} letters.",
    Play.MISSING_LETTERS: "That word uses letters you don't have.",
    Play.BAD_WORD: "That word isn't in the dictionary.",
}


def format_tiles(tiles: str) -> str:
    return " ".join(tiles)


def print_introduction(out: Callable = print) -> None:
    """Banner, starting tiles, letter score chart and rules."""
    num_tiles = game_config.NUM_TILES
    out(BANNER)
    out("This game is a modified version of Scrabble. The game starts with a pool of letter tiles, with")
    out(f"the following group of {len(full_pool_letters())} tiles:\n")
    letters = full_pool_letters()
    out(format_tiles(letters[:50]))
    out(format_tiles(letters[50:]) + "\n")
    out(f"The game starts with {num_tiles} tiles being chosen at random to fill the player's hand. The player must")
    out(f"then create a valid word, with a length from {game_config.MIN_WORD_LENGTH} to {num_tiles} letters, "
        "from the tiles in their hand. The")
    out("\"word\" entered by the player is checked for length, then checked to make sure it is made up of")
    out("letters from the current hand (and, with --strict, checked against the word list). If any of these")
    out("tests fail, the game terminates. If the word is valid, points are added to the player's score")
    out("according to the following table (these scores are taken from the game of Scrabble):")
    scores = game_config.SCRABBLE_LETTER_SCORES
    out("".join(f"{letter:>3}" for letter in scores))
    out("".join(f"{value:>3}" for value in scores.values()) + "\n")
    out("The score is doubled (BONUS) if the word has consecutive double letters (e.g. ball).\n")
    out("Once the player's score has been updated, more tiles are chosen at random from the remaining pool")
    out(f"of letters, to fill the player's hand to {num_tiles} letters. The player again creates a word, and the")
    out("process continues. The game ends when the player enters an invalid word, or the letters in the")
    out("pool and player's hand run out. Ready? Let's play!\n")


def print_tiles_remaining(game: Game, out: Callable = print) -> None:
    out("\nHere are the tiles remaining in the pool of letters:")
    letters = game.pool.letters()
    for start in range(0, len(letters), 20):
        out(format_tiles(letters[start:start + 20]))
    out("")


def print_status(game: Game, out: Callable = print) -> None:
    print_tiles_remaining(game, out)
    out(f"Player Score: {game.score_card.score(PLAYER)}")
    out(f"Computer Score: {game.score_card.score(COMPUTER)}\n")
    out(f"THE TILES IN YOUR HAND ARE: {format_tiles(game.player_hand.letters())}")
    out(f"THE TILES IN THE COMPUTER HAND ARE: {format_tiles(game.computer_hand.letters())}\n")


def prompt_for_word(game: Game, input_fn: Callable, out: Callable) -> str:
    while True:
        word = input_fn("Please enter a word created from your current set of tiles -> ").strip()
        if word != "?":
            return word
        solution = game.hint()
        if not game.strict:
            out("Hints need a word list; start the game with --strict.")
        elif solution is None:
            out("No dictionary word fits your tiles.")
        else:
            out(f"Hint: {solution.best} ({solution.score} points)")


def print_final_scores(game: Game, out: Callable = print) -> None:
    out("\nFinal Scores:")
    out(f"Player: {game.score_card.score(PLAYER)}")
    out(f"Computer: {game.score_card.score(COMPUTER)}")
    winner = game.winner()
    if winner == PLAYER:
        out("You win!")
    elif winner == COMPUTER:
        out("Computer wins!")
    else:
        out("It's a tie!")


def run_game(game: Game, input_fn: Callable = input, out: Callable = print) -> None:
    """Alternate player and computer turns until the game ends."""
    try:
        while not game.is_over():
            print_status(game, out)

            result = game.play_player_word(prompt_for_word(game, input_fn, out))
            if result.verdict is not Play.GOOD:
                out(REJECTION_MESSAGES[result.verdict])
                out("Invalid word! Game over.")
                break
            bonus = " (double letter BONUS!)" if has_double_letters(result.word) else ""
            out(f"{result.word} scores {result.score} points{bonus}")

            print_status(game, out)
            input_fn("It's the computer's turn. Hit ENTER on the keyboard to continue -> ")

            result = game.play_computer_turn()
            out(f"The computer chose: {result.word} ({result.score} points)")
    except (EOFError, KeyboardInterrupt):
        out("")
        logger.info("game interrupted")
    print_final_scores(game, out)
    game.finish()


def load_dictionary(path: str) -> Dictionary:
    dictionary = Dictionary()
    dictionary.read(path)
    return dictionary


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Scrapple against the computer.")
    parser.add_argument("--seed", type=int, help="Random seed for a repeatable game")
    parser.add_argument("--strict", action="store_true", help="Also check words against the word list")
    parser.add_argument("--dictionary", default=game_config.DICTIONARY_PATH, help="Word list used with --strict")
    parser.add_argument("--log-file", default=game_config.GAME_LOG_PATH, help="JSONL game log")
    parser.add_argument("--no-log", action="store_true", help="Don't write a game log")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None, input_fn: Callable = input, out: Callable = print) -> int:
    params = GameParams.from_args(parse_args(argv))
    logging.basicConfig(level=logging.DEBUG if params.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info(str(params))

    dictionary = None
    if params.strict:
        try:
            dictionary = load_dictionary(params.dictionary_path)
        except OSError as e:
            logger.exception(e)
            out(f"Could not read word list {params.dictionary_path}: {e}")
            return 1

    seed = params.seed if params.seed is not None else int(datetime.now().timestamp())
    game_logger = GameLogger(params.log_file)
    try:
        game_logger.start_logging()
        game_logger.log_seed(seed)

        print_introduction(out)
        input_fn("HIT ENTER on the keyboard to continue:")
        game = Game.new(random.Random(seed), dictionary=dictionary, game_logger=game_logger)
        run_game(game, input_fn, out)
    except (EOFError, KeyboardInterrupt):
        out("")
    finally:
        game_logger.stop_logging()
    return 0


if __name__ == "__main__":
    sys.exit(main())
