"""
Testing letter evaluation and keyboard status tracking.
"""

import pytest

from wordvibe.config import load_answer_list, load_valid_words
from wordvibe.models import InvalidGuessShape, MatchStatus
from wordvibe.services.match_service import (
    create_completed_guess, evaluate, is_valid_word, is_winning_guess, normalize_word, update_key_statuses
)

from conftest import A, C, P, make_guess


def test_solution_against_itself_is_all_correct():
    assert evaluate('crane', 'crane') == [C] * 5


def test_duplicate_guess_letters_speed_vs_sheep():
    assert evaluate('speed', 'sheep') == [C, P, C, C, A]


def test_duplicate_guess_letters_eerie_vs_elder():
    assert evaluate('eerie', 'elder') == [C, P, P, A, A]


def test_exact_match_claims_letter_before_present():
    assert evaluate('llama', 'hello') == [P, P, A, A, A]
    # both 'l's of the solution are claimed in place, so the leading 'l' is absent
    assert evaluate('lolly', 'hello') == [A, P, C, C, A]


def test_no_common_letters():
    assert evaluate('brick', 'funny') == [A] * 5


def test_case_is_ignored():
    assert evaluate('CRANE', 'crane') == [C] * 5


@pytest.mark.parametrize('guess, solution', [
    ('speed', 'sheep'), ('eerie', 'elder'), ('geese', 'eagle'), ('abbey', 'babes'), ('mamma', 'mommy'),
])
def test_marks_never_exceed_letter_frequency(guess, solution):
    result = evaluate(guess, solution)
    assert len(result) == 5
    assert all(status in (C, P, A) for status in result)
    for letter in set(guess):
        marked = sum(1 for g, s in zip(guess, result) if g == letter and s != A)
        assert marked <= solution.count(letter)


@pytest.mark.parametrize('bad', ['four', 'sixsix', 'cr4ne', 'cra e', '', None, 12345])
def test_malformed_guess_is_rejected(bad):
    with pytest.raises(InvalidGuessShape):
        evaluate(bad, 'crane')


def test_malformed_solution_is_rejected():
    with pytest.raises(InvalidGuessShape):
        evaluate('crane', 'cranes')


def test_is_winning_guess():
    assert is_winning_guess('crane', 'crane') is True
    assert is_winning_guess('crate', 'crane') is False


def test_create_completed_guess():
    row = create_completed_guess('Stare', 'crane')
    assert row.letters == ['s', 't', 'a', 'r', 'e']
    assert row.matches == [A, A, C, P, C]
    assert row.is_complete is True
    assert row.is_correct is False

    winner = create_completed_guess('crane', 'crane')
    assert winner.is_correct is True


def test_key_status_only_upgrades():
    keys = update_key_statuses({}, make_guess('stare', [A, A, C, P, C]))
    assert keys['s'] == A
    assert keys['r'] == P
    assert keys['a'] == C

    # 'r' becomes correct, 'a' revealed absent elsewhere must not downgrade
    keys = update_key_statuses(keys, make_guess('raaty', [C, A, A, A, A]))
    assert keys['r'] == C
    assert keys['a'] == C
    assert keys['y'] == A


def test_key_status_leaves_input_untouched():
    original = {'s': MatchStatus.ABSENT}
    update_key_statuses(original, make_guess('stare', [P, A, A, A, A]))
    assert original == {'s': MatchStatus.ABSENT}


def test_key_status_ignores_incomplete_rows():
    assert update_key_statuses({}, make_guess('', None, is_complete=False)) == {}


def test_is_valid_word():
    valid = load_valid_words('en')
    assert is_valid_word('CRANE', valid)
    assert is_valid_word('eerie', valid)
    assert not is_valid_word('zzzzz', valid)
    assert is_valid_word('Crane', ['crane', 'stare'])


def test_answer_lists_are_subset_of_valid_words():
    for locale in ('en', 'tr'):
        assert set(load_answer_list(locale)) <= load_valid_words(locale)


def test_normalize_word_turkish_casing():
    assert normalize_word('KAŞIK', 'tr') == 'kaşık'
    assert normalize_word('İNCİR', 'tr') == 'incir'
    assert normalize_word('KAŞIK') == 'kaşik'


def test_normalize_word_rejects_dotted_capital_outside_turkish():
    # 'İ'.lower() is two code points
    with pytest.raises(InvalidGuessShape):
        normalize_word('İNCİR')
