"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple


class LetterStatus(Enum):
    """Per-position evaluation of a guessed letter."""
    EXACT = "EXACT"
    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    UNUSED = "UNUSED"  # keyboard only, never part of a Feedback

    @property
    def code(self) -> str:
        """Single-character display tag."""
        return self.value[0]


# Keyboard letters only ever upgrade along this order
LETTER_STATUS_RANK: Dict[LetterStatus, int] = {
    LetterStatus.UNUSED: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.EXACT: 3,
}


class GameStatus(Enum):
    """Derived outcome of a game session."""
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    LOST = "LOST"


Feedback = Tuple[LetterStatus, ...]


def encode_feedback(feedback: Sequence[LetterStatus]) -> str:
    """Encodes feedback as tags, e.g. (EXACT, PRESENT, ABSENT) -> "EPA"."""
    return "".join(status.code for status in feedback)


@dataclass
class GameState:
    """Read-only snapshot of a game session handed to callers."""
    game_id: str
    attempts: int
    max_attempts: int
    word_length: int
    status: str
    guesses: List[str] = field(default_factory=list)
    guess_results: List[str] = field(default_factory=list)  # encoded feedback per guess
    letter_status: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over

    @property
    def game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS.value

    @property
    def won(self) -> bool:
        return self.status == GameStatus.WON.value
