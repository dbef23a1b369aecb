"""
Round Service

Hosts rounds in memory and runs the guess pipeline in the order a client
would: shape check, word list check, hard mode check, evaluation, keyboard
update and vibe scoring.
"""

import logging
import threading
import uuid
from typing import Dict, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, SUPPORTED_LOCALES, load_valid_words
from ..models.errors import GuessRejected, InvalidGuessShape
from ..models.game import Guess, HardModeViolation, RoundState
from ..utils.dates import parse_date, today_utc
from ..utils.helpers import format_violation
from . import puzzle_service, vibe_service
from .hard_mode_service import check_hard_mode
from .match_service import evaluate, is_valid_word, normalize_word, update_key_statuses

logger = logging.getLogger(__name__)

ROUND_MODES = ('daily', 'random')


class RoundService:
    """
    Core round service managing multiple round sessions.

    This class handles:
    - Round session management with unique round IDs
    - Solution selection (daily or random) kept out of client state
    - Guess validation, hard mode enforcement and evaluation
    - Keyboard status and vibe score tracking per round

    Rounds live in memory only. A single lock serializes every read-modify-write
    so concurrent requests never interleave on one round.
    """

    def __init__(self, max_rounds: int = MAX_ROUNDS):
        self.rounds: Dict[str, Dict] = {}
        self.max_rounds = max_rounds
        self._lock = threading.Lock()

    def create_round(self, mode: str = 'daily', locale: str = 'en',
                     hard_mode: bool = False, date: Optional[str] = None) -> str:
        """
        Creates a new round.

        Args:
            mode: "daily" for the shared puzzle of ``date``, "random" for a casual round
            locale: Word list locale
            hard_mode: Whether revealed letters must be reused
            date: UTC calendar day the round is played on, today when omitted.
                Random rounds carry it too so their statistics event is dated.

        Returns:
            str: Unique round ID for this session
        """
        if mode not in ROUND_MODES:
            raise ValueError(f"Invalid mode '{mode}'. Must be one of {', '.join(ROUND_MODES)}")
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(f"Unsupported locale '{locale}'")
        if date is None:
            date = today_utc()
        parse_date(date)

        if mode == 'daily':
            solution = puzzle_service.daily_solution(date, locale)
        else:
            solution = puzzle_service.random_solution(locale)

        round_id = str(uuid.uuid4())
        round_data = {
            "solution": solution,
            "mode": mode,
            "date": date,
            "hard_mode": hard_mode,
            "current_row": 0,
            "guesses": [Guess.empty() for _ in range(self.max_rounds)],
            "key_statuses": {},
            "game_over": False,
            "won": False,
        }

        with self._lock:
            self.rounds[round_id] = round_data
        logger.info("Round %s created (mode=%s, locale=%s, hard_mode=%s)", round_id, mode, locale, hard_mode)
        return round_id

    def get_round_state(self, round_id: str) -> Optional[RoundState]:
        """
        Returns the current state of a round (without revealing the answer).

        Returns:
            RoundState object or None if round not found
        """
        with self._lock:
            round_data = self.rounds.get(round_id)
            if round_data is None:
                return None
            return self._build_state(round_id, round_data)

    def is_valid_guess(self, round_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific round.

        Returns:
            Tuple of (is_valid, error_message)
        """
        round_data = self.rounds.get(round_id)
        if round_data is None:
            return False, "Round not found"

        if round_data["game_over"]:
            return False, "Round is already over"

        locale = round_data["solution"].locale
        try:
            word = normalize_word(guess.strip() if isinstance(guess, str) else guess, locale)
        except InvalidGuessShape as e:
            return False, f"Guess {e.reason}"

        if not is_valid_word(word, load_valid_words(locale)):
            return False, "Word not in word list"

        return True, ""

    def check_hard_mode(self, round_id: str, guess: str) -> Optional[HardModeViolation]:
        """Returns the hard mode violation of a guess, or None if hard mode is off or satisfied."""
        round_data = self.rounds.get(round_id)
        if round_data is None or not round_data["hard_mode"]:
            return None
        row = round_data["current_row"]
        word = normalize_word(guess.strip(), round_data["solution"].locale)
        return check_hard_mode(word, round_data["guesses"][:row], row)

    def make_guess(self, round_id: str, guess: str) -> RoundState:
        """
        Processes a guess and updates round state.

        Validation and the hard mode check run under the same lock as the
        update, so the reason given is the one that applied to this guess.

        Returns:
            Updated RoundState

        Raises:
            GuessRejected: If the round is missing or over, the guess is
                malformed or unknown, or it breaks hard mode
        """
        with self._lock:
            is_valid, error = self.is_valid_guess(round_id, guess)
            if not is_valid:
                logger.warning("Guess rejected for round %s: %s", round_id, error)
                raise GuessRejected(error)
            violation = self.check_hard_mode(round_id, guess)
            if violation is not None:
                logger.warning("Guess rejected for round %s: hard mode violation", round_id)
                raise GuessRejected(format_violation(violation), violation)

            round_data = self.rounds[round_id]
            word = normalize_word(guess.strip(), round_data["solution"].locale)
            solution = round_data["solution"].word

            row = round_data["guesses"][round_data["current_row"]]
            for position, letter in enumerate(word):
                row.set_letter(position, letter)
            row.finalize(evaluate(word, solution))

            round_data["key_statuses"] = update_key_statuses(round_data["key_statuses"], row)
            round_data["current_row"] += 1

            if row.is_correct:
                round_data["won"] = True
                round_data["game_over"] = True
            elif round_data["current_row"] >= self.max_rounds:
                round_data["game_over"] = True

            return self._build_state(round_id, round_data)

    def statistics_event(self, round_id: str) -> Optional[Dict]:
        """The statistics event a finished round should apply, or None while it is in progress."""
        round_data = self.rounds.get(round_id)
        if round_data is None or not round_data["game_over"]:
            return None
        event = {
            "type": "win" if round_data["won"] else "loss",
            "date": round_data["date"],
            "is_daily": round_data["mode"] == "daily",
        }
        if round_data["won"]:
            event["guess_count"] = round_data["current_row"]
        return event

    def delete_round(self, round_id: str) -> bool:
        """
        Removes a round session from memory.

        Returns:
            bool: True if round was deleted, False if not found
        """
        with self._lock:
            if round_id in self.rounds:
                del self.rounds[round_id]
                return True
            return False

    def _build_state(self, round_id: str, round_data: Dict) -> RoundState:
        guesses = round_data["guesses"]
        return RoundState(
            round_id=round_id,
            mode=round_data["mode"],
            locale=round_data["solution"].locale,
            hard_mode=round_data["hard_mode"],
            date=round_data["date"],
            current_row=round_data["current_row"],
            max_rounds=self.max_rounds,
            game_over=round_data["game_over"],
            won=round_data["won"],
            guesses=[g.to_dict() for g in guesses],
            key_statuses={letter: status.value for letter, status in round_data["key_statuses"].items()},
            vibe=vibe_service.score(guesses, round_data["solution"].word).to_dict(),
            answer=round_data["solution"].word if round_data["game_over"] else None,
        )


# Global service instance
_round_service = None


def get_round_service() -> Optional[RoundService]:
    """Get the global round service instance."""
    return _round_service


def initialize_round_service(max_rounds: int = MAX_ROUNDS) -> RoundService:
    """Initialize the global round service instance."""
    global _round_service
    _round_service = RoundService(max_rounds)
    return _round_service
