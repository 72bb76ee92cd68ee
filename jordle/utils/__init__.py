"""
Utilities Package

Contains utility functions and the game logger.
"""

from .helpers import state_to_dict
from .game_logger import game_logger

__all__ = ['state_to_dict', 'game_logger']
