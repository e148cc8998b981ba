"""Core daily scheduling engine."""

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from ..analysis.productivity import analyze_productivity_and_suggest
from ..models.pattern import DEFAULT_PRODUCTIVITY_PATTERNS, ProductivityPattern
from ..models.schedule import ScheduledTask, SmartSchedule, TimeSlot
from ..models.task import Task, UserPreferences
from ..policies.base import SchedulingPolicy
from ..policies.smart import SmartPolicy
from ..utils.config import get_default_config, patterns_from_config
from ..utils.datetime_utils import time_on_date
from .slots import generate_time_slots

logger = logging.getLogger(__name__)

REASON_PREFIX = "Запланировано: "
REASON_URGENT = "срочная задача"
REASON_MORNING_PEAK = "утренний пик продуктивности"
REASON_QUICK_WIN = "быстрая задача для импульса"

QUICK_WIN_MINUTES = 30
MORNING_PEAK_PREFIXES = ('09', '10')


class DailyScheduler:
    """Greedy one-day scheduler: each task takes its best remaining slot."""
    
    def __init__(self, policy: Optional[SchedulingPolicy] = None, config: Optional[dict] = None):
        """Initialize scheduler with policy and configuration."""
        self.config = config if config is not None else get_default_config()
        self.policy = policy or SmartPolicy(self.config)
        self.scheduling_config = self.config.get('scheduling', {})
        self.patterns = patterns_from_config(self.config)
    
    def create_daily_schedule(
        self,
        tasks: Sequence[Task],
        preferences: Optional[UserPreferences] = None,
        day: Optional[Union[date, datetime]] = None,
        now: Optional[datetime] = None,
    ) -> SmartSchedule:
        """Build the plan for ``day`` from the todo tasks in ``tasks``."""
        if day is None:
            day = datetime.now()
        
        prefs = (preferences or UserPreferences()).resolve(self.scheduling_config)
        
        time_slots = generate_time_slots(
            prefs.working_hours_start,
            prefs.working_hours_end,
            prefs.focus_time,
            prefs.break_time,
        )
        
        todo_tasks = [task for task in tasks if task.status == 'todo']
        ordered_tasks = self.policy.order_tasks(todo_tasks)
        
        available_slots: List[TimeSlot] = list(time_slots)
        scheduled: List[ScheduledTask] = []
        unscheduled: List[Task] = []
        
        for task in ordered_tasks:
            slot = self.policy.find_optimal_slot(task, available_slots, self.patterns)
            
            if slot is None:
                logger.debug("No slot for %r (%d min)", task.title, task.get_estimated_minutes())
                unscheduled.append(task)
                continue
            
            scheduled.append(ScheduledTask(
                task=task,
                scheduled_start=time_on_date(slot.start, day),
                scheduled_end=time_on_date(slot.end, day),
                time_slot=slot,
                ai_reason=generate_scheduling_reason(task, slot),
            ))
            
            # One task per slot
            available_slots = [s for s in available_slots if s is not slot]
        
        completed_tasks = [task for task in tasks if task.status == 'completed']
        analysis = analyze_productivity_and_suggest(
            completed_tasks, now=now, patterns=self.patterns, config=self.config,
        )
        
        summary = self._compute_summary_stats(scheduled, unscheduled, time_slots)
        logger.info(
            "Scheduled %d of %d tasks for %s (%s policy)",
            summary['tasks_scheduled'], summary['tasks_total'],
            day.isoformat(), self.policy.get_policy_name(),
        )
        
        return SmartSchedule(
            date=day,
            slots=scheduled,
            productivity_score=analysis.score,
            recommendations=analysis.recommendations,
            insights=analysis.insights,
            unscheduled=unscheduled,
            summary=summary,
        )
    
    def _compute_summary_stats(
        self,
        scheduled: List[ScheduledTask],
        unscheduled: List[Task],
        time_slots: List[TimeSlot],
    ) -> Dict[str, Any]:
        """Compute summary statistics for the schedule."""
        default_minutes = self.scheduling_config.get('default_task_minutes', 30)
        scheduled_minutes = sum(s.task.get_estimated_minutes(default_minutes) for s in scheduled)
        focus_minutes = sum(slot.duration for slot in time_slots)
        
        return {
            'tasks_total': len(scheduled) + len(unscheduled),
            'tasks_scheduled': len(scheduled),
            'tasks_unscheduled': len(unscheduled),
            'scheduled_minutes': scheduled_minutes,
            'available_slots': len(time_slots),
            'slot_utilization_percent': round(scheduled_minutes / focus_minutes * 100, 1) if focus_minutes else 0.0,
        }


def generate_scheduling_reason(task: Task, slot: TimeSlot) -> str:
    """Explain why a task landed in a slot."""
    reasons = []
    
    if task.priority == 'urgent':
        reasons.append(REASON_URGENT)
    
    if slot.start.startswith(MORNING_PEAK_PREFIXES):
        reasons.append(REASON_MORNING_PEAK)
    
    if task.estimated_minutes and task.estimated_minutes <= QUICK_WIN_MINUTES:
        reasons.append(REASON_QUICK_WIN)
    
    return REASON_PREFIX + ', '.join(reasons)


def smart_task_prioritization(tasks: Sequence[Task]) -> List[Task]:
    """Return tasks ordered by priority, deadline, then estimate."""
    return SmartPolicy().order_tasks(tasks)


def find_optimal_time_slot(
    task: Task,
    available_slots: Sequence[TimeSlot],
    patterns: Sequence[ProductivityPattern] = DEFAULT_PRODUCTIVITY_PATTERNS,
) -> Optional[TimeSlot]:
    """Best-scoring slot that fits the task, or None."""
    return SmartPolicy().find_optimal_slot(task, available_slots, patterns)


def create_daily_schedule(
    tasks: Sequence[Task],
    preferences: Optional[Union[UserPreferences, dict]] = None,
    date: Optional[Union[date, datetime]] = None,
    now: Optional[datetime] = None,
    config: Optional[dict] = None,
) -> SmartSchedule:
    """Plan one day; ``preferences`` may be a UserPreferences or its dict form."""
    if not isinstance(preferences, UserPreferences):
        preferences = UserPreferences.from_dict(preferences)
    return DailyScheduler(config=config).create_daily_schedule(tasks, preferences, date, now)
