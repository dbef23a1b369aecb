"""
Services Package

Contains the rules engine and the round host built on top of it.
"""

from .match_service import evaluate, is_winning_guess, create_completed_guess, update_key_statuses, is_valid_word
from .hard_mode_service import check_hard_mode
from .vibe_service import score, score_partial
from .puzzle_service import daily_word, random_word
from .statistics_service import apply_win, apply_loss, reset, transition
from .round_service import RoundService, get_round_service

__all__ = [
    'evaluate', 'is_winning_guess', 'create_completed_guess', 'update_key_statuses', 'is_valid_word',
    'check_hard_mode',
    'score', 'score_partial',
    'daily_word', 'random_word',
    'apply_win', 'apply_loss', 'reset', 'transition',
    'RoundService', 'get_round_service'
]
