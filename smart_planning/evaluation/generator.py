"""Sample task generator for demos and tests."""

import random
from datetime import datetime, timedelta
from typing import List

from ..models.task import PRIORITIES, Task

TITLES = [
    'Review pull request',
    'Write weekly report',
    'Prepare client demo',
    'Fix login bug',
    'Plan sprint backlog',
    'Reply to emails',
    'Update documentation',
    'Team sync notes',
]


class TaskGenerator:
    """Generates deterministic task sets for a given day."""
    
    def __init__(self, seed: int = 42, config: dict = None):
        """Initialize generator with seed for reproducibility."""
        self.seed = seed
        self.random = random.Random(seed)
        self.config = config or {}
    
    def generate_tasks(
        self,
        count: int,
        start_date: datetime,
        due_date_range_days: int = 7,
        completed_ratio: float = 0.2,
    ) -> List[Task]:
        """Generate a mix of todo and completed tasks around ``start_date``."""
        tasks = []
        
        for i in range(count):
            # Vary task sizes (mostly quick, some deep work)
            if self.random.random() < 0.4:
                estimated_minutes = self.random.choice([15, 20, 30])
            elif self.random.random() < 0.8:
                estimated_minutes = self.random.choice([45, 60, 90])
            else:
                estimated_minutes = self.random.choice([120, 180])
            
            # Some tasks leave the estimate to the default
            if self.random.random() < 0.1:
                estimated_minutes = None
            
            priority = self.random.choice(PRIORITIES)
            
            due_date = None
            if self.random.random() < 0.6:
                due_date = start_date + timedelta(days=self.random.randint(0, due_date_range_days))
            
            status = 'todo'
            completed_at = None
            if self.random.random() < completed_ratio:
                status = 'completed'
                completed_at = start_date.replace(
                    hour=self.random.randint(8, 12), minute=self.random.choice([0, 15, 30, 45]),
                    second=0, microsecond=0,
                )
            
            tasks.append(Task(
                task_id=f"task_{i:03d}",
                title=f"{self.random.choice(TITLES)} #{i}",
                priority=priority,
                status=status,
                estimated_minutes=estimated_minutes,
                due_date=due_date,
                completed_at=completed_at,
            ))
        
        return tasks
