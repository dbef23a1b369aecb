"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .errors import (
    WordVibeError, InvalidGuessShape, EmptyWordList, InvalidGuessCount,
    InvalidDate, GuessAlreadyFinalized, GuessRejected
)
from .game import (
    MatchStatus, Trend, ViolationKind, KeyStatusMap, Guess, Solution,
    VibeScore, HardModeViolation, RoundState
)
from .statistics import GameStatistics, Win, Loss, Reset, StatisticsEvent

__all__ = [
    'WordVibeError', 'InvalidGuessShape', 'EmptyWordList', 'InvalidGuessCount',
    'InvalidDate', 'GuessAlreadyFinalized', 'GuessRejected',
    'MatchStatus', 'Trend', 'ViolationKind', 'KeyStatusMap', 'Guess', 'Solution',
    'VibeScore', 'HardModeViolation', 'RoundState',
    'GameStatistics', 'Win', 'Loss', 'Reset', 'StatisticsEvent'
]
