"""
Puzzle Service

Chooses the secret word of a round. Daily words are derived from the UTC
calendar day and the locale so every player sees the same puzzle; casual
rounds pick uniformly at random.
"""

import logging
import random
from typing import Callable, Optional, Sequence

from ..config.game_settings import SUPPORTED_LOCALES, load_answer_list
from ..models.errors import EmptyWordList
from ..models.game import Solution
from ..utils.dates import parse_date

logger = logging.getLogger(__name__)

MASK_32 = 0xFFFFFFFF


def date_to_seed(value: str) -> int:
    """
    Reduce a string to a non-negative 32-bit seed.

    Rolling ``hash * 31 + code_unit`` over UTF-16 code units, wrapped to a
    signed 32-bit integer at every step, then made absolute. Changing any
    part of this changes every daily word already served.
    """
    encoded = value.encode('utf-16-le')
    hash_value = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        hash_value = (hash_value * 31 + code_unit) & MASK_32
    if hash_value >= 0x80000000:
        hash_value -= 0x100000000
    return abs(hash_value)


def mulberry32(seed: int) -> Callable[[], float]:
    """Mulberry32 generator returning floats in [0, 1)."""
    state = seed & MASK_32

    def next_float() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & MASK_32
        t = state
        t = ((t ^ (t >> 15)) * (t | 1)) & MASK_32
        t ^= (t + (((t ^ (t >> 7)) * (t | 61)) & MASK_32)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    return next_float


def _answers_for(locale: str, answers: Optional[Sequence[str]]) -> Sequence[str]:
    if answers is None:
        if locale not in SUPPORTED_LOCALES:
            raise EmptyWordList(f"No answer list for locale '{locale}'")
        answers = load_answer_list(locale)
    if not answers:
        raise EmptyWordList(f"Answer list for locale '{locale}' is empty")
    return answers


def daily_word(date: str, locale: str = 'en', answers: Optional[Sequence[str]] = None) -> str:
    """
    Returns the shared daily word for a UTC calendar day.

    Args:
        date: Calendar day as ``YYYY-MM-DD`` (UTC, supplied by the caller)
        locale: Locale tag, part of the seed so locales are independent
        answers: Answer list override; defaults to the locale's bundled list

    Raises:
        InvalidDate: If ``date`` is not a valid calendar day
        EmptyWordList: If there is nothing to choose from
    """
    parse_date(date)
    answers = _answers_for(locale, answers)
    rng = mulberry32(date_to_seed(date + locale))
    index = int(rng() * len(answers))
    return answers[index]


def random_word(locale: str = 'en', answers: Optional[Sequence[str]] = None,
                rng: Optional[random.Random] = None) -> str:
    """Returns a uniformly random answer for casual (non-daily) rounds."""
    answers = _answers_for(locale, answers)
    return (rng or random).choice(answers)


def daily_solution(date: str, locale: str = 'en') -> Solution:
    word = daily_word(date, locale)
    logger.debug("Daily solution selected for %s/%s", date, locale)
    return Solution(word, locale)


def random_solution(locale: str = 'en') -> Solution:
    return Solution(random_word(locale), locale)


def is_game_for_today(saved_date: Optional[str], today: str) -> bool:
    """Check if a saved daily round belongs to the caller's current day."""
    return saved_date == today
