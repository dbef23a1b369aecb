"""
Testing streak and statistics transitions.
"""

import pytest

from wordvibe.models import GameStatistics, InvalidDate, InvalidGuessCount, Loss, Reset, Win
from wordvibe.services.statistics_service import (
    apply_loss, apply_win, check_streak_milestone, event_from_dict, reset, transition, win_tier
)


def assert_invariants(stats):
    assert stats.games_won <= stats.games_played
    assert stats.current_streak <= stats.max_streak
    assert sum(stats.guess_distribution) == stats.games_won


def test_first_daily_win_starts_streak():
    stats = apply_win(GameStatistics(), 3, '2024-01-15', True)
    assert stats.games_played == 1
    assert stats.games_won == 1
    assert stats.guess_distribution == (0, 0, 1, 0, 0, 0)
    assert stats.current_streak == 1
    assert stats.max_streak == 1
    assert stats.last_played_date == '2024-01-15'
    assert stats.last_completed_date == '2024-01-15'
    assert_invariants(stats)


def test_consecutive_wins_then_gap():
    stats = apply_win(GameStatistics(), 3, '2024-01-15', True)
    stats = apply_win(stats, 4, '2024-01-16', True)
    assert (stats.current_streak, stats.max_streak) == (2, 2)

    stats = apply_win(stats, 2, '2024-01-19', True)
    assert (stats.current_streak, stats.max_streak) == (1, 2)
    assert stats.last_completed_date == '2024-01-19'
    assert_invariants(stats)


def test_loss_breaks_streak_but_keeps_max():
    stats = apply_win(GameStatistics(), 3, '2024-01-15', True)
    stats = apply_win(stats, 4, '2024-01-16', True)
    stats = apply_loss(stats, '2024-01-17', True)
    assert stats.current_streak == 0
    assert stats.max_streak == 2
    assert stats.games_played == 3
    assert stats.games_won == 2
    assert stats.last_completed_date == '2024-01-17'
    assert_invariants(stats)


def test_same_day_win_leaves_streak_unchanged():
    stats = apply_win(GameStatistics(), 3, '2024-01-15', True)
    stats = apply_win(stats, 5, '2024-01-15', True)
    assert stats.current_streak == 1
    assert stats.games_won == 2
    assert stats.last_completed_date == '2024-01-15'
    assert_invariants(stats)


@pytest.mark.parametrize('previous, current', [
    ('2024-01-31', '2024-02-01'),
    ('2024-02-28', '2024-02-29'),
    ('2024-02-29', '2024-03-01'),
    ('2023-12-31', '2024-01-01'),
])
def test_streak_crosses_calendar_boundaries(previous, current):
    stats = apply_win(GameStatistics(), 1, previous, True)
    stats = apply_win(stats, 1, current, True)
    assert stats.current_streak == 2


def test_non_leap_year_gap():
    stats = apply_win(GameStatistics(), 1, '2023-02-28', True)
    stats = apply_win(stats, 1, '2023-03-02', True)
    assert stats.current_streak == 1


def test_win_after_gap_from_loss_keeps_invariants():
    stats = apply_loss(GameStatistics(), '2024-01-10', True)
    stats = apply_win(stats, 2, '2024-01-15', True)
    assert (stats.current_streak, stats.max_streak) == (1, 1)
    assert_invariants(stats)


def test_non_daily_results_leave_streak_alone():
    stats = apply_win(GameStatistics(), 3, '2024-01-15', True)
    before = (stats.current_streak, stats.max_streak, stats.last_completed_date)

    stats = apply_win(stats, 2, '2024-01-20', False)
    assert (stats.current_streak, stats.max_streak, stats.last_completed_date) == before
    assert stats.last_played_date == '2024-01-20'

    stats = apply_loss(stats, '2024-01-21', False)
    assert (stats.current_streak, stats.max_streak, stats.last_completed_date) == before
    assert stats.last_played_date == '2024-01-21'
    assert stats.games_played == 3
    assert_invariants(stats)


def test_transitions_do_not_mutate_input():
    original = GameStatistics()
    apply_win(original, 1, '2024-01-15', True)
    assert original == GameStatistics()


@pytest.mark.parametrize('count', [0, 7, -1, 2.5, None, True])
def test_out_of_range_guess_count(count):
    with pytest.raises(InvalidGuessCount):
        apply_win(GameStatistics(), count, '2024-01-15', True)


def test_invalid_date():
    with pytest.raises(InvalidDate):
        apply_loss(GameStatistics(), '01/15/2024', True)


def test_reset_returns_zero_value():
    stats = apply_win(GameStatistics(), 3, '2024-01-15', True)
    assert reset() == GameStatistics()
    assert transition(stats, Reset()) == GameStatistics()


def test_transition_dispatch():
    stats = transition(GameStatistics(), Win(2, '2024-01-15'))
    stats = transition(stats, Loss('2024-01-16', is_daily=False))
    assert stats.games_played == 2
    assert stats.current_streak == 1

    with pytest.raises(TypeError):
        transition(stats, 'win')


def test_event_from_dict():
    assert event_from_dict({'type': 'win', 'guess_count': 4, 'date': '2024-01-15'}) == Win(4, '2024-01-15', True)
    assert event_from_dict({'type': 'loss', 'date': '2024-01-15', 'is_daily': False}) == Loss('2024-01-15', False)
    assert event_from_dict({'type': 'reset'}) == Reset()
    with pytest.raises(ValueError):
        event_from_dict({'type': 'draw'})


def test_statistics_round_trip_through_dict():
    stats = apply_win(GameStatistics(), 6, '2024-01-15', True)
    assert GameStatistics.from_dict(stats.to_dict()) == stats
    assert GameStatistics.from_dict(None) == GameStatistics()


def test_win_percentage():
    assert GameStatistics().win_percentage == 0
    stats = apply_win(GameStatistics(), 1, '2024-01-15', True)
    stats = apply_loss(stats, '2024-01-16', True)
    stats = apply_loss(stats, '2024-01-17', True)
    assert stats.win_percentage == 33


def test_streak_milestones():
    assert check_streak_milestone(7) == 7
    assert check_streak_milestone(365) == 365
    assert check_streak_milestone(8) is None


def test_win_tier():
    assert win_tier(1).name == 'GENIUS'
    assert win_tier(6).name == 'PHEW'
    assert win_tier(0).name == 'GENIUS'
    assert win_tier(9).name == 'PHEW'
