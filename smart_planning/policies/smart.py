"""Priority and energy-aware scheduling policy."""

from typing import List, Optional, Sequence

from ..models.pattern import ENERGY_VALUES, ProductivityPattern, find_pattern
from ..models.schedule import TimeSlot
from ..models.task import PRIORITY_WEIGHTS, Task
from .base import SchedulingPolicy

DEFAULT_SCORING = {
    'energy_match': 30,
    'energy_adjacent': 15,
    'task_type_match': 25,
    'focus_capacity_factor': 0.2,
    'morning_urgency_bonus': 20,
    'morning_urgency_hours': [9, 10, 11],
}

TASK_ENERGY_REQUIREMENTS = {
    'urgent': 'high',
    'high': 'high',
    'medium': 'medium',
    'low': 'low',
}


class SmartPolicy(SchedulingPolicy):
    """Orders by priority, deadline and size; scores slots by hourly energy."""
    
    def __init__(self, config: Optional[dict] = None):
        """Initialize policy with scoring weights from config."""
        super().__init__(config or {})
        self.weights = dict(DEFAULT_SCORING)
        self.weights.update(self.config.get('scoring', {}))
    
    def order_tasks(self, tasks: Sequence[Task]) -> List[Task]:
        """Order by priority, then due date (dated first), then shortest estimate."""
        def sort_key(task: Task):
            # Primary: priority weight (higher first, so negate)
            priority_key = -PRIORITY_WEIGHTS[task.priority]
            
            # Secondary: tasks with a deadline first, earliest deadline first
            has_due_key = 0 if task.due_date else 1
            due_key = task.due_date.timestamp() if task.due_date else 0.0
            
            # Tertiary: quick wins first
            duration_key = task.get_estimated_minutes(self.default_minutes)
            
            return (priority_key, has_due_key, due_key, duration_key)
        
        return sorted(tasks, key=sort_key)
    
    def score_slot(
        self,
        task: Task,
        slot: TimeSlot,
        patterns: Sequence[ProductivityPattern],
    ) -> float:
        """Additive score from energy match, task affinity, focus and morning urgency."""
        hour = slot.start_hour
        pattern = find_pattern(patterns, hour) or (patterns[0] if patterns else None)
        
        score = 0.0
        
        if pattern is not None:
            required = TASK_ENERGY_REQUIREMENTS[task.priority]
            if pattern.energy_level == required:
                score += self.weights['energy_match']
            elif abs(ENERGY_VALUES.get(pattern.energy_level, 0) - ENERGY_VALUES[required]) == 1:
                score += self.weights['energy_adjacent']
            
            if task.priority in pattern.task_types:
                score += self.weights['task_type_match']
            
            score += pattern.focus_capacity * self.weights['focus_capacity_factor']
        
        if task.priority == 'urgent' and hour in self.weights['morning_urgency_hours']:
            score += self.weights['morning_urgency_bonus']
        
        return score
    
    def get_policy_name(self) -> str:
        """Return policy name."""
        return "SMART"
