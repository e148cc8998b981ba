"""Base scheduling policy interface."""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..models.pattern import ProductivityPattern
from ..models.schedule import TimeSlot
from ..models.task import DEFAULT_TASK_MINUTES, Task

logger = logging.getLogger(__name__)


class SchedulingPolicy(ABC):
    """Abstract base class for scheduling policies."""
    
    def __init__(self, config: dict):
        """Initialize policy with configuration."""
        self.config = config
        self.default_minutes = config.get('scheduling', {}).get(
            'default_task_minutes', DEFAULT_TASK_MINUTES
        )
    
    @abstractmethod
    def order_tasks(self, tasks: Sequence[Task]) -> List[Task]:
        """Order tasks according to policy logic."""
        pass
    
    @abstractmethod
    def score_slot(
        self,
        task: Task,
        slot: TimeSlot,
        patterns: Sequence[ProductivityPattern],
    ) -> float:
        """Score how well a slot suits a task (higher is better)."""
        pass
    
    @abstractmethod
    def get_policy_name(self) -> str:
        """Return the name of this policy."""
        pass
    
    def find_optimal_slot(
        self,
        task: Task,
        available_slots: Sequence[TimeSlot],
        patterns: Sequence[ProductivityPattern],
    ) -> Optional[TimeSlot]:
        """Pick the best-scoring slot long enough for the task."""
        duration = task.get_estimated_minutes(self.default_minutes)
        suitable = [slot for slot in available_slots if slot.duration >= duration]
        
        if not suitable:
            return None
        
        scored = [(slot, self.score_slot(task, slot, patterns)) for slot in suitable]
        
        # Stable sort: equal scores keep the earliest slot first
        scored.sort(key=lambda item: item[1], reverse=True)
        
        best_slot, best_score = scored[0]
        logger.debug(
            "Best slot for %r: %s-%s (score %.1f of %d candidates)",
            task.title, best_slot.start, best_slot.end, best_score, len(scored),
        )
        return best_slot
