"""
Hard Mode Service

Validates a new guess against the constraints revealed by earlier rows.
"""

import logging
from typing import Optional, Sequence, Union

from ..models.game import WORD_LENGTH, Guess, HardModeViolation, MatchStatus, ViolationKind
from .match_service import normalize_word

logger = logging.getLogger(__name__)


def check_hard_mode(current_guess: Union[Guess, str],
                    previous_guesses: Sequence[Guess],
                    current_index: int) -> Optional[HardModeViolation]:
    """
    Check a guess against every revealed constraint of the round.

    Prior rows are walked in order. Within a row, letters revealed as correct
    must stay in place before letters revealed as present must be reused.

    Args:
        current_guess: The candidate row or word, not yet finalized
        previous_guesses: Rows of the round so far; incomplete rows are ignored
        current_index: Row index of the candidate (0 for the first guess)

    Returns:
        The first violation found, or None when the guess is acceptable
    """
    word = current_guess.word if isinstance(current_guess, Guess) else current_guess
    word = normalize_word(word)

    if current_index == 0:
        return None

    for previous in previous_guesses:
        if not previous.is_complete:
            continue

        for position in range(WORD_LENGTH):
            letter = previous.letters[position]
            if previous.matches[position] == MatchStatus.CORRECT and letter and word[position] != letter:
                logger.debug("Hard mode: position %d must be %s in '%s'", position, letter, word)
                return HardModeViolation(ViolationKind.MISPLACED_CORRECT, letter, position)

        for position in range(WORD_LENGTH):
            letter = previous.letters[position]
            if previous.matches[position] == MatchStatus.PRESENT and letter and letter not in word:
                logger.debug("Hard mode: '%s' must contain %s", word, letter)
                return HardModeViolation(ViolationKind.MISSING_PRESENT, letter)

    return None
