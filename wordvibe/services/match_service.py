"""
Match Service

Implements the letter evaluation rules: comparing a guess to the solution,
building finalized guess rows and tracking the best status seen per key.
"""

import logging
from typing import Iterable, List, Optional

from ..models.errors import InvalidGuessShape
from ..models.game import WORD_LENGTH, Guess, KeyStatusMap, MatchStatus

logger = logging.getLogger(__name__)

# Dotted and dotless I pair differently in Turkish
_CASE_TABLES = {
    'tr': str.maketrans({'I': 'ı', 'İ': 'i'}),
}


def lower_word(word: str, locale: Optional[str] = None) -> str:
    """Lowercase a word using the casing rules of ``locale``."""
    table = _CASE_TABLES.get(locale)
    if table is not None:
        word = word.translate(table)
    return word.lower()


def normalize_word(word, locale: Optional[str] = None) -> str:
    """
    Validate and lowercase a five letter word.

    Raises:
        InvalidGuessShape: If the word is not a string of exactly five letters
    """
    if not isinstance(word, str):
        raise InvalidGuessShape(word, "must be a string")
    if len(word) != WORD_LENGTH:
        raise InvalidGuessShape(word, f"must be exactly {WORD_LENGTH} letters")
    if not word.isalpha():
        raise InvalidGuessShape(word, "must contain only letters")

    lowered = lower_word(word, locale)
    # 'İ' lowercases to 'i' plus a combining dot outside Turkish
    if len(lowered) != WORD_LENGTH:
        raise InvalidGuessShape(word, f"must be exactly {WORD_LENGTH} letters")
    return lowered


def evaluate(guess: str, solution: str) -> List[MatchStatus]:
    """
    Implements the two-pass letter evaluation algorithm.

    Exact matches are claimed first so that a repeated guess letter is only
    marked present while unclaimed copies remain in the solution.

    Args:
        guess: The 5-letter word guessed
        solution: The 5-letter secret word

    Returns:
        List[MatchStatus]: One CORRECT, PRESENT or ABSENT status per position
    """
    guess = normalize_word(guess)
    solution = normalize_word(solution)

    remaining = {}
    for letter in solution:
        remaining[letter] = remaining.get(letter, 0) + 1

    result = [MatchStatus.ABSENT] * WORD_LENGTH

    # First pass: exact positions
    for i in range(WORD_LENGTH):
        if guess[i] == solution[i]:
            result[i] = MatchStatus.CORRECT
            remaining[guess[i]] -= 1

    # Second pass: presence among the letters not already claimed
    for i in range(WORD_LENGTH):
        if result[i] == MatchStatus.CORRECT:
            continue
        letter = guess[i]
        if remaining.get(letter, 0) > 0:
            result[i] = MatchStatus.PRESENT
            remaining[letter] -= 1

    return result


def is_winning_guess(guess: str, solution: str) -> bool:
    """Check if a guess is the winning word."""
    return guess.lower() == solution.lower()


def create_completed_guess(guess: str, solution: str) -> Guess:
    """Create a finalized guess row with calculated matches."""
    word = normalize_word(guess)
    row = Guess(letters=list(word))
    row.finalize(evaluate(word, solution))
    return row


def update_key_statuses(key_statuses: KeyStatusMap, guess: Guess) -> KeyStatusMap:
    """
    Merge a finalized guess into the keyboard status map.

    A key only moves up in precedence (correct > present > absent > unset);
    the input map is left untouched and an updated copy is returned.
    """
    updated = dict(key_statuses)
    for letter, status in zip(guess.letters, guess.matches):
        if not letter or status == MatchStatus.UNSET:
            continue
        current = updated.get(letter, MatchStatus.UNSET)
        if status.precedence > current.precedence:
            updated[letter] = status
    return updated


def is_valid_word(word: str, valid_words: Iterable[str]) -> bool:
    """Check if a word is in the valid word list (case-insensitive)."""
    if not isinstance(word, str):
        return False
    if not isinstance(valid_words, (set, frozenset)):
        valid_words = {w.lower() for w in valid_words}
    found = word.lower() in valid_words
    if not found:
        logger.debug("Rejected word not in list: %s", word)
    return found
