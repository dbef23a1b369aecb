"""
Testing the vibe meter score, trend and labels.
"""

import pytest

from wordvibe.models import Trend, VibeScore
from wordvibe.services.vibe_service import VIBE_THRESHOLDS, raw_guess_score, score, score_partial, vibe_label

from conftest import A, C, P, make_guess

SOLUTION = 'crane'


def empty_row():
    return make_guess('', None, is_complete=False)


def board(*rows):
    rows = list(rows)
    return rows + [empty_row() for _ in range(6 - len(rows))]


def test_no_completed_guesses():
    assert score(board(), SOLUTION) == VibeScore(0, Trend.SAME, 'Start guessing!')


def test_raw_score_points():
    assert raw_guess_score([C, C, C, C, C]) == 100
    assert raw_guess_score([P, P, P, P, P]) == 40
    assert raw_guess_score([A, A, P, P, C]) == 36
    assert raw_guess_score([A] * 5) == 0


def test_all_correct_is_perfect():
    result = score(board(make_guess('crane', [C] * 5)), SOLUTION)
    assert result.score == 100
    assert result.label == 'Perfect Vibe!'


def test_best_guess_defines_the_score():
    guesses = board(
        make_guess('stare', [A, A, C, P, C]),  # 48
        make_guess('pious', [A, A, A, A, A]),  # 0
    )
    result = score(guesses, SOLUTION)
    assert result.score == 48
    assert result.trend == Trend.DOWN
    assert result.label == 'Building...'


def test_trend():
    up = score(board(make_guess('pious', [A] * 5), make_guess('stare', [A, A, C, P, C])), SOLUTION)
    assert up.trend == Trend.UP
    same = score(board(make_guess('pious', [A] * 5), make_guess('buddy', [A] * 5)), SOLUTION)
    assert same.trend == Trend.SAME
    single = score(board(make_guess('stare', [A, A, C, P, C])), SOLUTION)
    assert single.trend == Trend.SAME


@pytest.mark.parametrize('value, label', [
    (0, 'Keep Trying'), (19, 'Keep Trying'), (20, 'Early Days'), (39, 'Early Days'),
    (40, 'Building...'), (60, 'Getting Warmer'), (80, 'Strong Vibe'), (99, 'Strong Vibe'),
    (100, 'Perfect Vibe!'),
])
def test_label_bands(value, label):
    assert vibe_label(value) == label


def test_thresholds():
    assert VIBE_THRESHOLDS == (20, 40, 60, 80)


def test_partial_zero_tiles_and_no_prior_rows():
    guesses = board(make_guess('stare', [A, A, P, P, C]))
    assert score_partial(guesses, SOLUTION, 0, 0).score == 0


def test_partial_is_monotonic_and_ends_at_full_score():
    guesses = board(make_guess('crane', [C] * 5))
    scores = [score_partial(guesses, SOLUTION, 0, n).score for n in range(6)]
    assert scores == [0, 20, 40, 60, 80, 100]
    assert score_partial(guesses, SOLUTION, 0, 5) == score(guesses, SOLUTION)


def test_partial_counts_prior_rows():
    guesses = board(
        make_guess('stare', [A, A, P, P, C]),
        make_guess('crane', [C] * 5),
    )
    assert score_partial(guesses, SOLUTION, 1, 1).score == 36
    assert score_partial(guesses, SOLUTION, 1, 3).score == 60
    assert score_partial(guesses, SOLUTION, 1, 5) == score(guesses[:2], SOLUTION)


def test_partial_never_decreases_with_weaker_active_row():
    guesses = board(
        make_guess('crane', [C, C, C, A, A]),
        make_guess('enact', [P, P, P, P, A]),
    )
    scores = [score_partial(guesses, SOLUTION, 1, n).score for n in range(6)]
    assert scores == sorted(scores)
    assert all(s == 60 for s in scores)


def test_partial_present_tiles():
    guesses = board(make_guess('encar', [P] * 5))
    assert score_partial(guesses, SOLUTION, 0, 1).score == 8
    assert score_partial(guesses, SOLUTION, 0, 3).score == 24
    assert score_partial(guesses, SOLUTION, 0, 5).score == 40


def test_partial_ignores_rows_after_the_active_one():
    guesses = board(
        make_guess('stare', [A, A, P, P, C]),
        make_guess('crane', [C] * 5),
    )
    assert score_partial(guesses, SOLUTION, 0, 5).score == 36


def test_partial_rejects_row_outside_board():
    with pytest.raises(ValueError):
        score_partial(board(), SOLUTION, 6, 1)


def test_scoring_is_deterministic():
    guesses = board(make_guess('stare', [A, A, P, P, C]), make_guess('crane', [C] * 5))
    assert score(guesses, SOLUTION) == score(guesses, SOLUTION)
