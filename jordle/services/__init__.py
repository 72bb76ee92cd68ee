"""
Services Package

Contains the guess evaluation engine and the session service built on it.
"""

from .evaluator import GuessEvaluator, InvalidGuess, compute_feedback, validate_word
from .game_service import GameNotFound, GameService, get_game_service, initialize_game_service

__all__ = [
    'GuessEvaluator', 'InvalidGuess', 'compute_feedback', 'validate_word',
    'GameNotFound', 'GameService', 'get_game_service', 'initialize_game_service'
]
