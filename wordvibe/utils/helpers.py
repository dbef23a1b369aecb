"""
Helper Functions

Contains utility functions used by the HTTP layer: the English phrasing of
rules engine results and the next-word countdown.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from ..models.game import HardModeViolation, ViolationKind


def ordinal_suffix(n: int) -> str:
    """Get ordinal suffix for a number (1st, 2nd, 3rd, 4th, 11th, ...)."""
    if 11 <= n % 100 <= 13:
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')


def format_violation(violation: Optional[HardModeViolation]) -> Optional[str]:
    """English message for a hard mode violation, e.g. '1st letter must be C'."""
    if violation is None:
        return None
    letter = violation.letter.upper()
    if violation.kind == ViolationKind.MISPLACED_CORRECT:
        n = violation.position + 1
        return f"{n}{ordinal_suffix(n)} letter must be {letter}"
    return f"Guess must contain {letter}"


def time_until_next_word(now: Optional[datetime] = None) -> Dict[str, int]:
    """Hours, minutes and seconds until the next UTC midnight."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    tomorrow = (now + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)
    remaining = int((tomorrow - now).total_seconds())
    return {
        'hours': remaining // 3600,
        'minutes': remaining % 3600 // 60,
        'seconds': remaining % 60
    }


def parse_flag(value, name: str) -> bool:
    """Read a JSON boolean, also accepting the strings 'true' and 'false'."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    raise ValueError(f"{name} must be true or false")
