"""
Guess Evaluator

Core Wordle engine: validates guesses, scores them against the target word
and tracks attempts until the game is won or lost.
"""

import string
from typing import List, Optional
from ..config.game_settings import MAX_ATTEMPTS, WORD_LENGTH
from ..models.game import Feedback, GameStatus, LetterStatus


ASCII_LETTERS = frozenset(string.ascii_letters)


class InvalidGuess(ValueError):
    """Raised when a guess cannot be evaluated. State is never modified."""


def normalize_word(word: str) -> str:
    return word.strip().lower()


def validate_word(word: str, word_length: int = WORD_LENGTH) -> str:
    """
    Normalizes a word and checks its shape.

    Args:
        word: Raw guess or target
        word_length: Required number of letters

    Returns:
        str: The lowercase word

    Raises:
        InvalidGuess: If the word has the wrong length or a non a-z character
    """
    if not isinstance(word, str):
        raise InvalidGuess("Guess must be a valid string")

    stripped = word.strip()

    if len(stripped) != word_length:
        raise InvalidGuess(f"Guess must be exactly {word_length} letters")

    # Checked before lowercasing: some non-ASCII characters lowercase to a-z
    if not all(char in ASCII_LETTERS for char in stripped):
        raise InvalidGuess("Guess must contain only letters")

    return stripped.lower()


def compute_feedback(target: str, guess: str) -> Feedback:
    """
    Scores a guess against the target with the two-pass Wordle rule.

    Exact matches are taken first and consume their target letter. Remaining
    letters are then matched left to right against what is left of the
    target, so a letter is never marked more times than the target holds it.
    """
    if len(target) != len(guess):
        raise ValueError(f"Guess length {len(guess)} does not match target length {len(target)}")

    result: List[Optional[LetterStatus]] = []
    remaining: List[Optional[str]] = list(target)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == target[i]:
            result.append(LetterStatus.EXACT)
            remaining[i] = None
        else:
            result.append(None)

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if result[i] is not None:
            continue

        if letter in remaining:
            result[i] = LetterStatus.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            result[i] = LetterStatus.ABSENT

    return tuple(result)


class GuessEvaluator:
    """
    Single game session against one secret word.

    Owns the attempt counter and derives the game status from the latest
    feedback. Callers must serialize calls on one instance.
    """

    def __init__(self, target: str, word_length: int = WORD_LENGTH, max_attempts: int = MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        try:
            self._target = validate_word(target, word_length)
        except InvalidGuess as e:
            raise ValueError(f"Invalid target word {target!r}: {e}") from e

        self._word_length = word_length
        self._max_attempts = max_attempts
        self._attempts = 0
        self._status = GameStatus.IN_PROGRESS
        self._last_feedback: Optional[Feedback] = None

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status != GameStatus.IN_PROGRESS

    @property
    def last_feedback(self) -> Optional[Feedback]:
        return self._last_feedback

    def evaluate(self, guess: str) -> Feedback:
        """
        Scores a guess and advances the game.

        Raises:
            InvalidGuess: If the guess is malformed or the game is already over
        """
        if self.is_over:
            raise InvalidGuess("Game is already over")

        normalized = validate_word(guess, self._word_length)
        feedback = compute_feedback(self._target, normalized)

        self._attempts += 1
        self._last_feedback = feedback

        if all(status == LetterStatus.EXACT for status in feedback):
            self._status = GameStatus.WON
        elif self._attempts >= self._max_attempts:
            self._status = GameStatus.LOST

        return feedback

    def reset(self) -> None:
        """Starts over against the same target."""
        self._attempts = 0
        self._status = GameStatus.IN_PROGRESS
        self._last_feedback = None

    def get_target(self) -> str:
        """Secret word. Only meant to be shown once the game is over."""
        return self._target
