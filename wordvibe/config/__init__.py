"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and word lists
"""

from .app_config import Config, TestingConfig
from .game_settings import (
    WORD_LENGTH, MAX_ROUNDS, SUPPORTED_LOCALES,
    load_answer_list, load_valid_words, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'TestingConfig',
    # Game rules
    'WORD_LENGTH', 'MAX_ROUNDS', 'SUPPORTED_LOCALES',
    'load_answer_list', 'load_valid_words', 'validate_word_list_integrity'
]
