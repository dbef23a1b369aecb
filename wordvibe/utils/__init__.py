"""
Utilities Package

Contains calendar helpers, presentation helpers, decorators and the logger.
The logger and decorators are imported from their modules directly so the
rules engine can use the date helpers without configuring logging.
"""

from .dates import parse_date, format_date, is_next_day, today_utc, day_number

__all__ = ['parse_date', 'format_date', 'is_next_day', 'today_utc', 'day_number']
