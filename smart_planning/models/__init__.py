"""Planning data models."""

from .pattern import DEFAULT_PRODUCTIVITY_PATTERNS, ProductivityPattern
from .schedule import ProductivityAnalysis, ScheduledTask, SmartSchedule, TimeSlot
from .task import Task, UserPreferences

__all__ = [
    'DEFAULT_PRODUCTIVITY_PATTERNS',
    'ProductivityPattern',
    'ProductivityAnalysis',
    'ScheduledTask',
    'SmartSchedule',
    'TimeSlot',
    'Task',
    'UserPreferences',
]
