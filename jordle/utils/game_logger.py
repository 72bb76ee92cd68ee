"""
Game Logger Module

Structured log of the JSON API: requests, responses, game outcomes and
errors. Every entry is one JSON object on its own line of the day's file.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path
from ..config.app_config import Config

EVENT_TYPES = ('USER_ACTION', 'SERVER_RESPONSE_SUCCESS', 'SERVER_RESPONSE_ERROR', 'GAME_EVENT', 'ERROR')


class GameLogger:
    """
    Writes game server activity to a dated file under the log directory.

    The file is chosen once at startup; a long-running server keeps writing
    to it past midnight and reports statistics for that same file.
    """

    def __init__(self, log_dir: str = Config.LOG_DIR, level: str = Config.LOG_LEVEL):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        self.level = logging.getLevelName(level.upper())
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Attach file and console handlers to the 'jordle' logger."""
        logger = logging.getLogger('jordle')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _write(self, level: int, event_type: str, action: str,
               user_ip: Optional[str], details: Dict[str, Any]) -> None:
        entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user_ip': user_ip or 'unknown',
            'details': details
        }
        self.logger.log(level, json.dumps(entry, ensure_ascii=False, default=str))

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Records an incoming API call.

        Args:
            request: Flask request object
            action: e.g. 'new_game', 'submit_guess', 'restart_game'
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {'game_id': game_id, 'method': request.method, 'path': request.path, **kwargs}
        self._write(logging.INFO, 'USER_ACTION', action, request.remote_addr, details)

    def log_server_response(self, request, action: str, success: bool,
                            response_data: Dict[str, Any], game_id: Optional[str] = None, **kwargs):
        """Records the response to an API call; failures are logged as warnings."""
        details = {
            'game_id': game_id,
            'response': self._summarize_response(response_data),
            **kwargs
        }
        if success:
            self._write(logging.INFO, 'SERVER_RESPONSE_SUCCESS', action, request.remote_addr, details)
        else:
            self._write(logging.WARNING, 'SERVER_RESPONSE_ERROR', action, request.remote_addr, details)

    def log_game_event(self, game_id: str, event: str, user_ip: Optional[str], **kwargs):
        """Records an outcome such as 'game_won', 'game_lost' or 'game_restarted'."""
        self._write(logging.INFO, 'GAME_EVENT', event, user_ip, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self._write(logging.ERROR, 'ERROR', action, request.remote_addr, details)

    def _summarize_response(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Reduces a game state to counters so the log never holds the board
        or the answer of a running game.
        """
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        summary = data.copy()
        state = summary.get('state')
        if isinstance(state, dict):
            summary['state'] = {
                'attempts': state.get('attempts'),
                'max_attempts': state.get('max_attempts'),
                'status': state.get('status'),
                'answer_revealed': state.get('answer') is not None
            }
        return summary

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts entries per event type in the current log file."""
        stats: Dict[str, Any] = {'log_file': str(self.log_file), 'total_entries': 0}
        stats.update({event_type.lower(): 0 for event_type in EVENT_TYPES})

        if not self.log_file.exists():
            return stats

        with open(self.log_file, 'r', encoding='utf-8') as f:
            for line in f:
                parts = line.rstrip('\n').split(' | ', 2)
                if len(parts) != 3:
                    continue
                try:
                    event_type = json.loads(parts[2]).get('event_type')
                except ValueError:
                    continue
                stats['total_entries'] += 1
                if event_type in EVENT_TYPES:
                    stats[event_type.lower()] += 1

        return stats


# Global logger instance
game_logger = GameLogger()
