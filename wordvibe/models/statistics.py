"""
Statistics Data Models

Contains the cumulative player statistics record and the events that
transition it.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

HISTOGRAM_SIZE = 6


@dataclass(frozen=True)
class GameStatistics:
    """Cumulative statistics for one installation."""
    games_played: int = 0
    games_won: int = 0
    current_streak: int = 0
    max_streak: int = 0
    guess_distribution: Tuple[int, ...] = field(default=(0,) * HISTOGRAM_SIZE)  # index 0 = won in 1
    last_played_date: Optional[str] = None
    last_completed_date: Optional[str] = None

    @property
    def win_percentage(self) -> int:
        if self.games_played == 0:
            return 0
        return round(self.games_won / self.games_played * 100)

    def to_dict(self) -> Dict:
        return {
            'games_played': self.games_played,
            'games_won': self.games_won,
            'current_streak': self.current_streak,
            'max_streak': self.max_streak,
            'guess_distribution': list(self.guess_distribution),
            'last_played_date': self.last_played_date,
            'last_completed_date': self.last_completed_date,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict]) -> 'GameStatistics':
        if not data:
            return cls()
        distribution = tuple(int(n) for n in data.get('guess_distribution', (0,) * HISTOGRAM_SIZE))
        if len(distribution) != HISTOGRAM_SIZE:
            raise ValueError(f"guess_distribution must have {HISTOGRAM_SIZE} entries")
        return cls(
            games_played=int(data.get('games_played', 0)),
            games_won=int(data.get('games_won', 0)),
            current_streak=int(data.get('current_streak', 0)),
            max_streak=int(data.get('max_streak', 0)),
            guess_distribution=distribution,
            last_played_date=data.get('last_played_date'),
            last_completed_date=data.get('last_completed_date'),
        )


@dataclass(frozen=True)
class Win:
    guess_count: int
    date: str
    is_daily: bool = True


@dataclass(frozen=True)
class Loss:
    date: str
    is_daily: bool = True


@dataclass(frozen=True)
class Reset:
    pass


StatisticsEvent = Union[Win, Loss, Reset]
