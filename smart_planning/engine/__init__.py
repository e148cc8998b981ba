"""Slot generation and daily schedule assembly."""

from .scheduler import (
    DailyScheduler,
    create_daily_schedule,
    find_optimal_time_slot,
    smart_task_prioritization,
)
from .slots import generate_time_slots

__all__ = [
    'DailyScheduler',
    'create_daily_schedule',
    'find_optimal_time_slot',
    'generate_time_slots',
    'smart_task_prioritization',
]
