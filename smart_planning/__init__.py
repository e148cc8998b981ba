"""Smart Planning Engine: heuristic task prioritization and daily scheduling."""

from .analysis.productivity import analyze_productivity_and_suggest
from .engine.scheduler import (
    DailyScheduler,
    create_daily_schedule,
    find_optimal_time_slot,
    smart_task_prioritization,
)
from .engine.slots import generate_time_slots
from .models import (
    DEFAULT_PRODUCTIVITY_PATTERNS,
    ProductivityAnalysis,
    ProductivityPattern,
    ScheduledTask,
    SmartSchedule,
    Task,
    TimeSlot,
    UserPreferences,
)

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_PRODUCTIVITY_PATTERNS',
    'DailyScheduler',
    'ProductivityAnalysis',
    'ProductivityPattern',
    'ScheduledTask',
    'SmartSchedule',
    'Task',
    'TimeSlot',
    'UserPreferences',
    'analyze_productivity_and_suggest',
    'create_daily_schedule',
    'find_optimal_time_slot',
    'generate_time_slots',
    'smart_task_prioritization',
]
