"""
Testing guess rows, dates and presentation helpers.
"""

from datetime import datetime, timezone

import pytest

from wordvibe.models import Guess, GuessAlreadyFinalized, MatchStatus, Solution
from wordvibe.utils.dates import is_next_day, today_utc
from wordvibe.utils.helpers import time_until_next_word

from conftest import A, C


def test_guess_lifecycle():
    row = Guess.empty()
    assert row.matches == [MatchStatus.UNSET] * 5
    for position, letter in enumerate('CRANE'):
        row.set_letter(position, letter)
    assert row.word == 'crane'

    row.pop_letter()
    assert row.word == 'cran'
    row.set_letter(4, 'e')

    row.finalize([C] * 5)
    assert row.is_complete and row.is_correct

    with pytest.raises(GuessAlreadyFinalized):
        row.finalize([A] * 5)
    with pytest.raises(GuessAlreadyFinalized):
        row.set_letter(0, 'x')


def test_guess_from_dict():
    row = Guess.from_dict({'word': 'Stare', 'matches': ['absent', 'absent', 'correct', 'present', 'correct']})
    assert row.letters == ['s', 't', 'a', 'r', 'e']
    assert row.matches[2] == MatchStatus.CORRECT
    assert row.is_complete is True
    assert row.is_correct is False
    assert Guess.from_dict(row.to_dict()) == row

    with pytest.raises(ValueError):
        Guess.from_dict({'word': 'stare', 'matches': ['green'] * 5})


def test_guess_from_dict_derives_is_correct():
    claimed = Guess.from_dict({'word': 'stare', 'matches': ['absent'] * 5, 'is_correct': True})
    assert claimed.is_correct is False

    solved = Guess.from_dict({'word': 'crane', 'matches': ['correct'] * 5})
    assert solved.is_correct is True


def test_guess_from_dict_checks_statuses_against_completion():
    with pytest.raises(ValueError):
        Guess.from_dict({'word': 'stare', 'matches': ['absent', 'absent', 'correct', 'present', '']})
    with pytest.raises(ValueError):
        Guess.from_dict({'letters': ['s', 't', '', '', ''], 'matches': ['correct'] + [''] * 4,
                         'is_complete': False})

    draft = Guess.from_dict({'letters': ['s', 't', '', '', ''], 'matches': [''] * 5,
                             'is_complete': False, 'is_correct': True})
    assert draft.is_complete is False
    assert draft.is_correct is False


def test_solution_is_lowercase():
    assert Solution('CRANE').word == 'crane'


def test_is_next_day():
    assert is_next_day('2024-02-28', '2024-02-29')
    assert not is_next_day('2024-02-28', '2024-03-01')
    assert not is_next_day('2024-01-15', '2024-01-15')


def test_today_utc():
    assert today_utc(datetime(2024, 1, 15, 23, 59, tzinfo=timezone.utc)) == '2024-01-15'


def test_time_until_next_word():
    remaining = time_until_next_word(datetime(2024, 1, 15, 22, 30, 15, tzinfo=timezone.utc))
    assert remaining == {'hours': 1, 'minutes': 29, 'seconds': 45}
