"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict
from ..models.game import GameState


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """Serializes a game state snapshot for a JSON response."""
    data = asdict(state)
    data['game_over'] = state.game_over
    data['won'] = state.won
    return data
