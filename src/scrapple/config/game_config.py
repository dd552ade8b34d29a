"""Centralized configuration for the Scrapple game: tiles, word lengths, scoring and paths."""

import os

# ============================================================================
# TILE SETTINGS
# ============================================================================
NUM_TILES = 8  # Tiles per hand; also the longest word a player may form

# 100 tiles in the shared pool
TILE_DISTRIBUTION = {
    'A': 10, 'B': 2, 'C': 2, 'D': 4, 'E': 13, 'F': 2,
    'G': 3, 'H': 2, 'I': 9, 'J': 1, 'K': 1, 'L': 4,
    'M': 2, 'N': 6, 'O': 8, 'P': 2, 'Q': 1, 'R': 6,
    'S': 4, 'T': 6, 'U': 4, 'V': 2, 'W': 2, 'X': 1,
    'Y': 2, 'Z': 1
}


# ============================================================================
# GAME LOGIC SETTINGS
# ============================================================================
MIN_WORD_LENGTH = 4  # Minimum word length for the player
MAX_WORD_LENGTH = NUM_TILES

# The computer picks a random word length in this range
COMPUTER_MIN_WORD_LENGTH = 4
COMPUTER_MAX_WORD_LENGTH = 6

# Solver utility input bounds
SOLVER_MIN_LETTERS = 3
SOLVER_MAX_LETTERS = 12

# Scrabble letter scores for word scoring
SCRABBLE_LETTER_SCORES = {
    'A': 1, 'B': 3, 'C': 3, 'D': 2, 'E': 1, 'F': 4,
    'G': 2, 'H': 4, 'I': 1, 'J': 8, 'K': 5, 'L': 1,
    'M': 3, 'N': 1, 'O': 1, 'P': 3, 'Q': 10, 'R': 1,
    'S': 1, 'T': 1, 'U': 1, 'V': 4, 'W': 4, 'X': 8,
    'Y': 4, 'Z': 10
}


# ============================================================================
# PATH SETTINGS
# ============================================================================
DATA_DIR = "assets/data"
DICTIONARY_PATH = os.environ.get("SCRAPPLE_DICTIONARY", os.path.join(DATA_DIR, "wordList.txt"))
GAME_LOG_PATH = os.environ.get("SCRAPPLE_GAME_LOG", "output/game.jsonl")
