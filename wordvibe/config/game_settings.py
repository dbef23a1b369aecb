"""
Game Configuration Constants Module

This module defines the game rule constants and loads the locale-specific
word lists. Two lists exist per locale:

- ``<locale>_answers.json``: words that may be chosen as a solution
- ``<locale>_guesses.json``: extra words accepted as guesses but never chosen

"""

import json
import os
from functools import lru_cache
from typing import FrozenSet, Final, List, Tuple

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every solution and guess."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

SUPPORTED_LOCALES: Final[Tuple[str, ...]] = ('en', 'tr')

WORDS_DIR: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words')


def _read_word_file(file_name: str) -> List[str]:
    """
    Load one word list from the words directory.

    Returns:
        List[str]: Lowercase 5-letter words in file order

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed or contains invalid words
    """
    json_file_path = os.path.join(WORDS_DIR, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}")

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    words = [word.lower() for word in word_list]
    validate_word_list_integrity(words)
    return words


def _check_locale(locale: str) -> None:
    if locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Unsupported locale '{locale}'. Expected one of {', '.join(SUPPORTED_LOCALES)}")


@lru_cache(maxsize=None)
def load_answer_list(locale: str = 'en') -> Tuple[str, ...]:
    """Return the ordered answer list for a locale.

    The order is part of the daily-word contract: the puzzle selector maps a
    seed onto an index into this tuple, so entries must only ever be appended.
    """
    _check_locale(locale)
    return tuple(_read_word_file(f'{locale}_answers.json'))


@lru_cache(maxsize=None)
def load_valid_words(locale: str = 'en') -> FrozenSet[str]:
    """Return every word accepted as a guess for a locale (answers included)."""
    _check_locale(locale)
    extra = _read_word_file(f'{locale}_guesses.json')
    return frozenset(load_answer_list(locale)) | frozenset(extra)


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message

    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if word != word.lower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True
