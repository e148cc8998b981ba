"""Utility functions."""

from .datetime_utils import format_time, is_same_day, parse_datetime, parse_time, time_on_date
from .logging import configure_logging

__all__ = [
    'configure_logging',
    'format_time',
    'is_same_day',
    'parse_datetime',
    'parse_time',
    'time_on_date',
]
