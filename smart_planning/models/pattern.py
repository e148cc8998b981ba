"""Hourly productivity patterns used for slot scoring."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

ENERGY_VALUES = {'low': 1, 'medium': 2, 'high': 3}


@dataclass(frozen=True)
class ProductivityPattern:
    """Typical energy and focus capacity for one hour of the day."""
    
    hour: int
    energy_level: str
    focus_capacity: int  # 0-100
    task_types: Tuple[str, ...]
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProductivityPattern':
        """Build a pattern from a config table row."""
        return cls(
            hour=int(data['hour']),
            energy_level=data.get('energy_level', data.get('energyLevel')),
            focus_capacity=int(data.get('focus_capacity', data.get('focusCapacity', 0))),
            task_types=tuple(data.get('task_types', data.get('taskTypes', ()))),
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to a config table row."""
        return {
            'hour': self.hour,
            'energy_level': self.energy_level,
            'focus_capacity': self.focus_capacity,
            'task_types': list(self.task_types),
        }


DEFAULT_PRODUCTIVITY_PATTERNS: Tuple[ProductivityPattern, ...] = (
    ProductivityPattern(9, 'high', 90, ('urgent', 'high')),
    ProductivityPattern(10, 'high', 95, ('urgent', 'high')),
    ProductivityPattern(11, 'high', 85, ('high', 'medium')),
    ProductivityPattern(12, 'medium', 60, ('medium', 'low')),
    ProductivityPattern(13, 'low', 40, ('low',)),  # lunch
    ProductivityPattern(14, 'medium', 70, ('medium',)),
    ProductivityPattern(15, 'medium', 80, ('medium', 'high')),
    ProductivityPattern(16, 'medium', 75, ('medium',)),
    ProductivityPattern(17, 'low', 50, ('low', 'medium')),
)


def find_pattern(
    patterns: List[ProductivityPattern],
    hour: int,
) -> Optional[ProductivityPattern]:
    """Return the pattern for an hour, or None if the table has no entry."""
    for pattern in patterns:
        if pattern.hour == hour:
            return pattern
    return None
