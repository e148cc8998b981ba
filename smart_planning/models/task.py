"""Task and user preference data models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..utils.datetime_utils import parse_datetime

PRIORITIES = ('low', 'medium', 'high', 'urgent')
STATUSES = ('todo', 'in_progress', 'completed', 'cancelled')

PRIORITY_WEIGHTS = {'urgent': 4, 'high': 3, 'medium': 2, 'low': 1}

DEFAULT_TASK_MINUTES = 30


@dataclass
class Task:
    """Represents a task owned by the task store."""
    
    title: str
    priority: str
    status: str = 'todo'
    task_id: Optional[str] = None
    description: Optional[str] = None
    estimated_minutes: Optional[int] = None
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
    
    def __post_init__(self):
        """Check enumerated fields and normalise dates to datetimes."""
        if self.priority not in PRIORITIES:
            raise ValueError(f"Unknown priority: {self.priority}")
        if self.status not in STATUSES:
            raise ValueError(f"Unknown status: {self.status}")
        self.due_date = parse_datetime(self.due_date)
        self.completed_at = parse_datetime(self.completed_at)
    
    def get_estimated_minutes(self, default: int = DEFAULT_TASK_MINUTES) -> int:
        """Get the estimate, falling back to the default when unset."""
        if self.estimated_minutes and self.estimated_minutes > 0:
            return self.estimated_minutes
        return default
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Task':
        """Build a task from store data (camelCase or snake_case keys)."""
        def pick(*keys):
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return None
        
        estimated = pick('estimated_minutes', 'estimatedMinutes')
        
        return cls(
            title=data.get('title', ''),
            priority=data.get('priority', 'medium'),
            status=data.get('status', 'todo'),
            task_id=pick('task_id', 'id'),
            description=data.get('description'),
            estimated_minutes=int(estimated) if estimated is not None else None,
            due_date=parse_datetime(pick('due_date', 'dueDate')),
            completed_at=parse_datetime(pick('completed_at', 'completedAt')),
            tags=list(data.get('tags') or []),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using the task store's key names."""
        return {
            'id': self.task_id,
            'title': self.title,
            'description': self.description,
            'priority': self.priority,
            'status': self.status,
            'estimatedMinutes': self.estimated_minutes,
            'dueDate': self.due_date.isoformat() if self.due_date else None,
            'completedAt': self.completed_at.isoformat() if self.completed_at else None,
            'tags': list(self.tags),
        }


@dataclass
class UserPreferences:
    """Working-day preferences; unset values fall back to config defaults."""
    
    working_hours_start: Optional[str] = None
    working_hours_end: Optional[str] = None
    focus_time: Optional[int] = None
    break_time: Optional[int] = None
    
    def resolve(self, defaults: Dict[str, Any]) -> 'UserPreferences':
        """Return preferences with every unset or zero value filled in."""
        return UserPreferences(
            working_hours_start=self.working_hours_start or defaults.get('working_hours_start', '09:00'),
            working_hours_end=self.working_hours_end or defaults.get('working_hours_end', '18:00'),
            focus_time=self.focus_time or defaults.get('focus_minutes', 90),
            break_time=self.break_time or defaults.get('break_minutes', 15),
        )
    
    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'UserPreferences':
        """Build preferences from the nested camelCase shape or flat snake_case keys."""
        if not data:
            return cls()
        
        working_hours = data.get('workingHours') or {}
        return cls(
            working_hours_start=working_hours.get('start') or data.get('working_hours_start'),
            working_hours_end=working_hours.get('end') or data.get('working_hours_end'),
            focus_time=data.get('focusTime') or data.get('focus_time'),
            break_time=data.get('breakTime') or data.get('break_time'),
        )
