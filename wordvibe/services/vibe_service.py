"""
Vibe Service

Turns the rows of a round into the 0-100 "vibe" closeness score, either for
the finalized board or for a row that is still being revealed tile by tile.
"""

from bisect import bisect_right
from typing import List, Optional, Sequence

from ..models.game import WORD_LENGTH, Guess, MatchStatus, Trend, VibeScore

POINTS = {
    MatchStatus.CORRECT: 20,
    MatchStatus.PRESENT: 8,
    MatchStatus.ABSENT: 0,
    MatchStatus.UNSET: 0,
}

MAX_SCORE = 100
VIBE_THRESHOLDS = (20, 40, 60, 80)
VIBE_LABELS = ('Keep Trying', 'Early Days', 'Building...', 'Getting Warmer', 'Strong Vibe')
PERFECT_LABEL = 'Perfect Vibe!'
START_LABEL = 'Start guessing!'


def raw_guess_score(matches: Sequence[MatchStatus], revealed: int = WORD_LENGTH) -> int:
    """Sum the points of the first ``revealed`` tiles of a row."""
    return sum(POINTS[status] for status in matches[:revealed])


def vibe_label(score: int) -> str:
    if score >= MAX_SCORE:
        return PERFECT_LABEL
    return VIBE_LABELS[bisect_right(VIBE_THRESHOLDS, score)]


def _build_score(raw_scores: List[int]) -> VibeScore:
    if not raw_scores:
        return VibeScore(0, Trend.SAME, START_LABEL)

    score = min(max(raw_scores), MAX_SCORE)

    trend = Trend.SAME
    if len(raw_scores) > 1:
        current, previous = raw_scores[-1], raw_scores[-2]
        if current > previous:
            trend = Trend.UP
        elif current < previous:
            trend = Trend.DOWN

    return VibeScore(score, trend, vibe_label(score))


def score(guesses: Sequence[Guess], solution: Optional[str] = None) -> VibeScore:
    """
    Score a round from its finalized rows.

    The score is the best row so far, not the latest or the average.
    ``solution`` is accepted for symmetry with the other entry points; the
    statuses already carry everything needed.
    """
    return _build_score([raw_guess_score(g.matches) for g in guesses if g.is_complete])


def score_partial(guesses: Sequence[Guess], solution: Optional[str],
                  active_row: int, revealed: int) -> VibeScore:
    """
    Score a round while ``active_row`` is being revealed.

    Finalized rows before the active one count in full; only the first
    ``revealed`` tiles of the active row count. The result never decreases as
    ``revealed`` grows and equals ``score(guesses[:active_row + 1])`` once all
    five tiles are shown.
    """
    if not 0 <= active_row < len(guesses):
        raise ValueError(f"Active row {active_row} is outside the board of {len(guesses)} rows")
    revealed = max(0, min(revealed, WORD_LENGTH))

    raw_scores = [raw_guess_score(g.matches) for g in guesses[:active_row] if g.is_complete]
    if revealed > 0:
        raw_scores.append(raw_guess_score(guesses[active_row].matches, revealed))
    return _build_score(raw_scores)
