import importlib
import json
from datetime import datetime

import pytest

game_logger_module = importlib.import_module("jordle.utils.game_logger")
from jordle.utils.game_logger import GameLogger


@pytest.fixture
def logger(tmp_path):
    yield GameLogger(log_dir=str(tmp_path))
    # hand the shared logging.Logger back to the global instance's directory
    global_logger = game_logger_module.game_logger
    global_logger.logger = global_logger._setup_logger()


def _flush(logger):
    for handler in logger.logger.handlers:
        handler.flush()


def test_game_event_entry(logger):
    logger.log_game_event("game-1", "game_won", "127.0.0.1", attempts_used=3)
    _flush(logger)

    line = logger.log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    entry = json.loads(line.split(" | ", 2)[2])
    assert entry["event_type"] == "GAME_EVENT"
    assert entry["action"] == "game_won"
    assert entry["user_ip"] == "127.0.0.1"
    assert entry["details"] == {"game_id": "game-1", "attempts_used": 3}

    stats = logger.get_log_stats()
    assert stats["total_entries"] == 1
    assert stats["game_event"] == 1
    assert stats["error"] == 0


def test_stats_follow_open_file_past_midnight(logger, monkeypatch):
    class NextDay(datetime):
        @classmethod
        def now(cls, tz=None):
            return cls(2099, 1, 1, 0, 5)

    log_file = logger.log_file
    monkeypatch.setattr(game_logger_module, "datetime", NextDay)

    logger.log_game_event("game-1", "game_lost", "127.0.0.1")
    _flush(logger)

    assert logger.log_file == log_file
    stats = logger.get_log_stats()
    assert stats["log_file"] == str(log_file)
    assert stats["game_event"] == 1


def test_response_summary_hides_board(logger):
    summary = logger._summarize_response({
        "success": True,
        "state": {
            "attempts": 2, "max_attempts": 6, "status": "IN_PROGRESS",
            "guesses": ["crane", "erase"], "answer": None,
        },
    })
    assert summary["state"] == {
        "attempts": 2,
        "max_attempts": 6,
        "status": "IN_PROGRESS",
        "answer_revealed": False,
    }
    assert logger._summarize_response(["x"]) == {"data_type": "list"}
