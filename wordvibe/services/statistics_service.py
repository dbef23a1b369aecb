"""
Statistics Service

Pure transitions over the cumulative ``GameStatistics`` record. Every
operation takes the current value plus an event and returns a new value;
nothing here reads or writes storage.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..models.errors import InvalidGuessCount
from ..models.statistics import HISTOGRAM_SIZE, GameStatistics, Loss, Reset, StatisticsEvent, Win
from ..utils.dates import is_next_day, parse_date

logger = logging.getLogger(__name__)

MILESTONE_THRESHOLDS = (3, 7, 14, 30, 50, 100, 200, 365)


@dataclass(frozen=True)
class WinTier:
    name: str
    guess_count: int


WIN_TIERS = (
    WinTier('GENIUS', 1),
    WinTier('MAGNIFICENT', 2),
    WinTier('IMPRESSIVE', 3),
    WinTier('SPLENDID', 4),
    WinTier('GREAT', 5),
    WinTier('PHEW', 6),
)


def apply_win(stats: GameStatistics, guess_count: int, date: str, is_daily: bool = True) -> GameStatistics:
    """
    Record a won round.

    Daily wins extend the streak when ``date`` follows the last completed
    day, restart it at 1 after a gap, and leave it alone when the day was
    already completed. Casual wins never touch the streak fields.

    Raises:
        InvalidGuessCount: If ``guess_count`` is outside 1..6
        InvalidDate: If ``date`` is not a valid calendar day
    """
    if isinstance(guess_count, bool) or not isinstance(guess_count, int) or not 1 <= guess_count <= HISTOGRAM_SIZE:
        raise InvalidGuessCount(guess_count)
    parse_date(date)

    distribution = list(stats.guess_distribution)
    distribution[guess_count - 1] += 1

    current_streak = stats.current_streak
    max_streak = stats.max_streak
    last_completed = stats.last_completed_date

    if is_daily and last_completed != date:
        if last_completed is None or is_next_day(last_completed, date):
            current_streak += 1
        else:
            current_streak = 1
        max_streak = max(max_streak, current_streak)
        last_completed = date

    updated = replace(
        stats,
        games_played=stats.games_played + 1,
        games_won=stats.games_won + 1,
        guess_distribution=tuple(distribution),
        current_streak=current_streak,
        max_streak=max_streak,
        last_played_date=date,
        last_completed_date=last_completed,
    )
    logger.debug("Win in %d on %s (daily=%s): streak %d -> %d",
                 guess_count, date, is_daily, stats.current_streak, updated.current_streak)
    return updated


def apply_loss(stats: GameStatistics, date: str, is_daily: bool = True) -> GameStatistics:
    """Record a lost round. A daily loss breaks the streak; the best streak is kept."""
    parse_date(date)

    updated = replace(stats, games_played=stats.games_played + 1, last_played_date=date)
    if is_daily:
        updated = replace(updated, current_streak=0, last_completed_date=date)

    logger.debug("Loss on %s (daily=%s): streak %d -> %d",
                 date, is_daily, stats.current_streak, updated.current_streak)
    return updated


def reset() -> GameStatistics:
    return GameStatistics()


def transition(stats: GameStatistics, event: StatisticsEvent) -> GameStatistics:
    """Apply a single statistics event."""
    if isinstance(event, Win):
        return apply_win(stats, event.guess_count, event.date, event.is_daily)
    if isinstance(event, Loss):
        return apply_loss(stats, event.date, event.is_daily)
    if isinstance(event, Reset):
        return reset()
    raise TypeError(f"Unknown statistics event: {event!r}")


def event_from_dict(data: dict) -> StatisticsEvent:
    """Build an event from its JSON form, e.g. ``{"type": "win", "guess_count": 3, ...}``."""
    event_type = (data or {}).get('type')
    if event_type == 'win':
        return Win(data.get('guess_count'), data.get('date'), bool(data.get('is_daily', True)))
    if event_type == 'loss':
        return Loss(data.get('date'), bool(data.get('is_daily', True)))
    if event_type == 'reset':
        return Reset()
    raise ValueError(f"Unknown statistics event type: {event_type!r}")


def check_streak_milestone(streak: int) -> Optional[int]:
    """Returns the milestone if the streak exactly matches one, None otherwise."""
    return streak if streak in MILESTONE_THRESHOLDS else None


def win_tier(guess_count: int) -> WinTier:
    """Returns the win tier for a guess count, clamped to the 1..6 range."""
    index = max(0, min(HISTOGRAM_SIZE - 1, guess_count - 1))
    return WIN_TIERS[index]
