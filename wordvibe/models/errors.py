"""
Error Types

Precondition failures raised by the rules engine. Callers are expected to
validate input before invoking the core, so any of these reaching the HTTP
layer is reported back as a client error.
"""


class WordVibeError(Exception):
    """Base class for all rules engine errors."""


class InvalidGuessShape(WordVibeError, ValueError):
    """A guess or solution is not exactly five alphabetic letters."""

    def __init__(self, word, reason: str):
        self.word = word
        self.reason = reason
        super().__init__(f"Invalid word {word!r}: {reason}")


class EmptyWordList(WordVibeError, LookupError):
    """No answer list is available to choose a solution from."""


class InvalidGuessCount(WordVibeError, ValueError):
    """A win was reported with a guess count outside the histogram range."""

    def __init__(self, guess_count):
        self.guess_count = guess_count
        super().__init__(f"Guess count must be between 1 and 6, got {guess_count!r}")


class InvalidDate(WordVibeError, ValueError):
    """A date string is not a valid YYYY-MM-DD calendar day."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date {value!r}, expected YYYY-MM-DD")


class GuessAlreadyFinalized(WordVibeError):
    """A guess row was modified after it had been finalized."""


class GuessRejected(WordVibeError):
    """A round refused a guess; ``violation`` is set for hard mode rejections."""

    def __init__(self, reason: str, violation=None):
        self.reason = reason
        self.violation = violation
        super().__init__(reason)
