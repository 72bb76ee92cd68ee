"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Feedback, GameState, GameStatus, LetterStatus, LETTER_STATUS_RANK, encode_feedback

__all__ = ['Feedback', 'GameState', 'GameStatus', 'LetterStatus', 'LETTER_STATUS_RANK', 'encode_feedback']
