"""JSON-lines logging of game results for later review."""

import json
import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class BaseLogger:
    """Base class for all JSONL-based loggers."""
    def __init__(self, log_file: Optional[str]):
        self.log_file = log_file
        self.log_f = None

    def start_logging(self):
        """Open the log file for writing."""
        if self.log_file:
            logger.info(f"Starting game log {self.log_file}")
            directory = os.path.dirname(self.log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            self.log_f = open(self.log_file, "w")

    def stop_logging(self):
        """Close the log file."""
        if self.log_f:
            self.log_f.close()
            self.log_f = None

    def _write_event(self, event: dict):
        """Write a dictionary as a JSON line to the log file."""
        if not self.log_f:
            return
        self.log_f.write(json.dumps(event) + "\n")
        self.log_f.flush()


class GameLogger(BaseLogger):
    """Logs the seed, every word played and the final result."""
    def log_seed(self, seed: int):
        event = {
            "event_type": "seed",
            "seed": seed
        }
        self._write_event(event)

    def log_word_played(self, player: int, word: str, score: int, verdict: str):
        event = {
            "event_type": "word_played",
            "player": player,
            "word": word,
            "score": score,
            "verdict": verdict
        }
        self._write_event(event)

    def log_game_over(self, player_score: int, computer_score: int, winner: Optional[int]):
        event = {
            "event_type": "game_over",
            "player_score": player_score,
            "computer_score": computer_score,
            "winner": winner
        }
        self._write_event(event)
