"""
Configuration Package

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word list
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ALPHABET, MAX_ATTEMPTS, WORD_LENGTH, WORD_LIST,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'ALPHABET', 'MAX_ATTEMPTS', 'WORD_LENGTH', 'WORD_LIST',
    'validate_word_list_integrity', 'get_word_statistics'
]
