#!/usr/bin/env python3
"""List every word a set of letters can make, and the best scoring one.

Usage:
    scrapple-solver                # interactive, Q to quit
    scrapple-solver AEIOUXYZ ...   # one answer per argument
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from scrapple.config import game_config
from scrapple.core.dictionary import Dictionary
from scrapple.core.letter_counts import is_alphabetic
from scrapple.core.solver import solve

logger = logging.getLogger(__name__)

QUIT = "Q"
COLUMNS = 5
COLUMN_WIDTH = 15


def is_valid_letters(text: str) -> bool:
    return (is_alphabetic(text)
            and game_config.SOLVER_MIN_LETTERS <= len(text) <= game_config.SOLVER_MAX_LETTERS)


def get_letters(prompt: str, input_fn: Callable = input) -> str:
    """Prompt until the user enters a valid set of letters or Q."""
    while True:
        entry = input_fn(prompt).strip()
        if entry.upper() == QUIT or is_valid_letters(entry):
            return entry.upper()


def format_words(words: list[str]) -> str:
    rows = []
    for start in range(0, len(words), COLUMNS):
        rows.append("".join(f"{word:<{COLUMN_WIDTH}}" for word in words[start:start + COLUMNS]))
    return "\n".join(rows)


def report(letters: str, dictionary: Dictionary, out: Callable = print) -> None:
    solution = solve(letters, dictionary.index())
    out("")
    if solution is None:
        out("No words found.\n")
        return
    out(format_words(solution.words))
    out(f"\nHighest scoring word: {solution.best}")
    out(f"Score = {solution.score}\n")


def run(dictionary: Dictionary, input_fn: Callable = input, out: Callable = print) -> None:
    prompt = (f"Enter {game_config.SOLVER_MIN_LETTERS}-{game_config.SOLVER_MAX_LETTERS} "
              "letters (or Q to quit): ")
    try:
        letters = get_letters(prompt, input_fn)
        while letters != QUIT:
            report(letters, dictionary, out)
            letters = get_letters(prompt, input_fn)
    except (EOFError, KeyboardInterrupt):
        out("")


def main(argv: Optional[list[str]] = None, input_fn: Callable = input, out: Callable = print) -> int:
    parser = argparse.ArgumentParser(description="Find every word buildable from a set of letters.")
    parser.add_argument("letters", nargs="*", help="Letters to solve for; omit to run interactively")
    parser.add_argument("--dictionary", default=game_config.DICTIONARY_PATH, help="Word list to search")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    dictionary = Dictionary()
    try:
        dictionary.read(args.dictionary)
    except OSError as e:
        logger.exception(e)
        out(f"Could not read word list {args.dictionary}: {e}")
        return 1

    if not args.letters:
        run(dictionary, input_fn, out)
        return 0

    status = 0
    for letters in args.letters:
        if not is_valid_letters(letters):
            out(f"{letters}: expected {game_config.SOLVER_MIN_LETTERS}-{game_config.SOLVER_MAX_LETTERS} letters")
            status = 2
            continue
        report(letters.upper(), dictionary, out)
    return status


if __name__ == "__main__":
    sys.exit(main())
