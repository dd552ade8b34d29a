#!/usr/bin/env python3

import json

from scrapple.game_logging.game_loggers import GameLogger


def read_events(path):
    return [json.loads(line) for line in path.read_text().splitlines() if line.strip()]


def test_game_logger_writes_jsonl(tmp_path):
    log_file = tmp_path / "output" / "game.jsonl"
    logger = GameLogger(str(log_file))
    logger.start_logging()
    logger.log_seed(42)
    logger.log_word_played(0, "BALL", 12, "GOOD")
    logger.log_game_over(12, 9, 0)
    logger.stop_logging()

    assert read_events(log_file) == [
        {"event_type": "seed", "seed": 42},
        {"event_type": "word_played", "player": 0, "word": "BALL", "score": 12, "verdict": "GOOD"},
        {"event_type": "game_over", "player_score": 12, "computer_score": 9, "winner": 0},
    ]


def test_game_logger_disabled():
    logger = GameLogger(None)
    logger.start_logging()
    logger.log_seed(1)
    logger.stop_logging()
    assert logger.log_f is None


def test_writes_ignored_before_start(tmp_path):
    log_file = tmp_path / "game.jsonl"
    logger = GameLogger(str(log_file))
    logger.log_seed(1)
    assert not log_file.exists()
