"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .errors import GuessAlreadyFinalized

WORD_LENGTH = 5


class MatchStatus(Enum):
    """Per-letter evaluation outcome. UNSET marks a tile not yet evaluated."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    UNSET = ""

    @property
    def precedence(self) -> int:
        """Rank used when merging statuses into the keyboard map."""
        return _PRECEDENCE[self]


_PRECEDENCE = {
    MatchStatus.CORRECT: 3,
    MatchStatus.PRESENT: 2,
    MatchStatus.ABSENT: 1,
    MatchStatus.UNSET: 0,
}


class Trend(Enum):
    """Direction of the latest guess compared to the one before it."""
    UP = "up"
    DOWN = "down"
    SAME = "same"


class ViolationKind(Enum):
    """Hard mode rule that a guess broke."""
    MISPLACED_CORRECT = "misplaced_correct"
    MISSING_PRESENT = "missing_present"


KeyStatusMap = Dict[str, MatchStatus]


@dataclass
class Guess:
    """
    One row of the board.

    A row starts empty, receives letters while incomplete and is finalized
    exactly once, after which it is never modified again.
    """
    letters: List[str] = field(default_factory=lambda: [''] * WORD_LENGTH)
    matches: List[MatchStatus] = field(default_factory=lambda: [MatchStatus.UNSET] * WORD_LENGTH)
    is_complete: bool = False
    is_correct: bool = False

    @classmethod
    def empty(cls) -> 'Guess':
        return cls()

    @property
    def word(self) -> str:
        return ''.join(self.letters)

    def set_letter(self, position: int, letter: str) -> None:
        if self.is_complete:
            raise GuessAlreadyFinalized("Cannot change letters of a finalized guess")
        self.letters[position] = letter.lower()

    def pop_letter(self) -> None:
        """Clear the right-most filled tile, if any."""
        if self.is_complete:
            raise GuessAlreadyFinalized("Cannot change letters of a finalized guess")
        for position in range(WORD_LENGTH - 1, -1, -1):
            if self.letters[position]:
                self.letters[position] = ''
                return

    def finalize(self, matches: List[MatchStatus]) -> None:
        if self.is_complete:
            raise GuessAlreadyFinalized(f"Guess '{self.word}' has already been finalized")
        self.matches = list(matches)
        self.is_correct = all(status == MatchStatus.CORRECT for status in self.matches)
        self.is_complete = True

    def to_dict(self) -> Dict:
        return {
            'letters': list(self.letters),
            'matches': [status.value for status in self.matches],
            'is_complete': self.is_complete,
            'is_correct': self.is_correct,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Guess':
        """
        Build a row from JSON; ``word`` may stand in for ``letters``.

        ``is_correct`` is never read from the payload. A complete row must carry
        a status on every tile and is correct only when all five are correct;
        an incomplete row must not carry any status.
        """
        if 'word' in data:
            letters = list(str(data['word']).lower())
        else:
            letters = [str(letter).lower() for letter in data.get('letters', [''] * WORD_LENGTH)]
        matches = [MatchStatus(value or '') for value in data.get('matches', [''] * WORD_LENGTH)]
        if len(letters) != WORD_LENGTH or len(matches) != WORD_LENGTH:
            raise ValueError(f"A guess row needs exactly {WORD_LENGTH} letters and {WORD_LENGTH} matches")

        is_complete = bool(data.get('is_complete', True))
        if is_complete and MatchStatus.UNSET in matches:
            raise ValueError("A complete guess row needs a status on every tile")
        if not is_complete and any(status != MatchStatus.UNSET for status in matches):
            raise ValueError("An incomplete guess row cannot carry match statuses")

        return cls(
            letters=letters,
            matches=matches,
            is_complete=is_complete,
            is_correct=is_complete and all(status == MatchStatus.CORRECT for status in matches),
        )


@dataclass(frozen=True)
class Solution:
    """The secret word for one round."""
    word: str
    locale: str = 'en'

    def __post_init__(self):
        object.__setattr__(self, 'word', self.word.lower())


@dataclass(frozen=True)
class VibeScore:
    """Closeness score shown by the vibe meter."""
    score: int
    trend: Trend
    label: str

    def to_dict(self) -> Dict:
        return {'score': self.score, 'trend': self.trend.value, 'label': self.label}


@dataclass(frozen=True)
class HardModeViolation:
    """Structured hard mode violation; phrasing is left to the presentation layer."""
    kind: ViolationKind
    letter: str
    position: Optional[int] = None

    def to_dict(self) -> Dict:
        return {'kind': self.kind.value, 'letter': self.letter, 'position': self.position}


@dataclass
class RoundState:
    """Round state representation returned to clients."""
    round_id: str
    mode: str
    locale: str
    hard_mode: bool
    date: Optional[str]
    current_row: int
    max_rounds: int
    game_over: bool
    won: bool
    guesses: List[Dict]
    key_statuses: Dict[str, str]
    vibe: Dict
    answer: Optional[str] = None  # Only included when the round is over
