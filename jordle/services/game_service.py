"""
Game Service

Manages single-player game sessions on top of the guess evaluator.
"""

import random
import uuid
from typing import Dict, List, Optional
from ..models.game import GameState, LetterStatus, LETTER_STATUS_RANK, encode_feedback
from ..config.game_settings import ALPHABET, MAX_ATTEMPTS, WORD_LENGTH, WORD_LIST
from .evaluator import GuessEvaluator, normalize_word


class GameNotFound(LookupError):
    """Raised when a game id does not refer to an active session."""


class _Session:
    """Evaluator plus the history a caller needs to redraw the board."""

    def __init__(self, evaluator: GuessEvaluator):
        self.evaluator = evaluator
        self.guesses: List[str] = []
        self.guess_results: List[str] = []
        self.letter_status: Dict[str, LetterStatus] = {letter: LetterStatus.UNUSED for letter in ALPHABET}


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Target selection when the caller does not supply one
    - Guess evaluation and keyboard letter tracking
    - Game state snapshots that hide the answer until the game is over
    """

    def __init__(self, word_list: Optional[List[str]] = None,
                 word_length: int = WORD_LENGTH, max_attempts: int = MAX_ATTEMPTS):
        self.games: Dict[str, _Session] = {}  # Store active games by game_id
        self.word_list = list(word_list) if word_list is not None else WORD_LIST.copy()
        self.word_length = word_length
        self.max_attempts = max_attempts

    def _pick_target(self, target: Optional[str]) -> str:
        if target is not None:
            return target
        if not self.word_list:
            raise ValueError("No target supplied and the word list is empty")
        return random.choice(self.word_list)

    def _new_session(self, target: Optional[str]) -> _Session:
        evaluator = GuessEvaluator(
            self._pick_target(target),
            word_length=self.word_length,
            max_attempts=self.max_attempts
        )
        return _Session(evaluator)

    def _get_session(self, game_id: str) -> _Session:
        try:
            return self.games[game_id]
        except KeyError:
            raise GameNotFound(f"Game not found: {game_id}") from None

    def create_new_game(self, target: Optional[str] = None) -> str:
        """
        Creates a new game session.

        Args:
            target: Secret word; picked at random from the word list when omitted

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the supplied target is malformed
        """
        game_id = str(uuid.uuid4())
        self.games[game_id] = self._new_session(target)
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Returns:
            GameState object or None if game not found
        """
        if game_id not in self.games:
            return None

        session = self.games[game_id]
        evaluator = session.evaluator

        # Create state object without exposing the answer unless game is over
        answer = evaluator.get_target() if evaluator.is_over else None

        return GameState(
            game_id=game_id,
            attempts=evaluator.attempts,
            max_attempts=evaluator.max_attempts,
            word_length=evaluator.word_length,
            status=evaluator.status.value,
            guesses=session.guesses.copy(),
            guess_results=session.guess_results.copy(),
            letter_status={letter: status.value for letter, status in session.letter_status.items()},
            answer=answer
        )

    def make_guess(self, game_id: str, guess: str) -> GameState:
        """
        Processes a guess and updates game state.

        Raises:
            GameNotFound: If the game does not exist
            InvalidGuess: If the guess is rejected; the session is unchanged
        """
        session = self._get_session(game_id)

        feedback = session.evaluator.evaluate(guess)
        normalized_guess = normalize_word(guess)

        session.guesses.append(normalized_guess)
        session.guess_results.append(encode_feedback(feedback))
        self._update_letter_status(session.letter_status, normalized_guess, feedback)

        return self.get_game_state(game_id)

    def _update_letter_status(self, letter_status: Dict[str, LetterStatus],
                              guess: str, feedback) -> None:
        """
        Updates keyboard letter tracking; a letter never downgrades.
        """
        for letter, new_status in zip(guess, feedback):
            if LETTER_STATUS_RANK[new_status] > LETTER_STATUS_RANK[letter_status[letter]]:
                letter_status[letter] = new_status

    def reset_game(self, game_id: str) -> GameState:
        """
        Clears attempts and history while keeping the same target word.

        Raises:
            GameNotFound: If the game does not exist
        """
        session = self._get_session(game_id)
        session.evaluator.reset()
        self.games[game_id] = _Session(session.evaluator)
        return self.get_game_state(game_id)

    def restart_game(self, game_id: str, target: Optional[str] = None) -> GameState:
        """
        Starts a fresh game under the same id with a new target word.

        Raises:
            GameNotFound: If the game does not exist
            ValueError: If the supplied target is malformed
        """
        self._get_session(game_id)
        self.games[game_id] = self._new_session(target)
        return self.get_game_state(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
