"""Input validation for tasks and working hours.

Validators collect every problem they find and never raise, so callers can
report all errors at once.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..models.task import PRIORITIES, STATUSES

TIME_PATTERN = re.compile(r'^([01]?[0-9]|2[0-3]):[0-5][0-9]$')

MAX_TITLE_LENGTH = 200
MIN_TITLE_LENGTH = 3
MAX_DESCRIPTION_LENGTH = 1000
MAX_ESTIMATED_MINUTES = 1440


@dataclass
class ValidationResult:
    """Outcome of a validation pass."""
    
    errors: List[str] = field(default_factory=list)
    
    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_time_range(start: str, end: str) -> ValidationResult:
    """Check two "HH:MM" strings form a non-empty same-day range."""
    result = ValidationResult()
    
    if not isinstance(start, str) or not TIME_PATTERN.match(start):
        result.errors.append("Invalid start time format (use HH:MM)")
    
    if not isinstance(end, str) or not TIME_PATTERN.match(end):
        result.errors.append("Invalid end time format (use HH:MM)")
    
    if result.is_valid:
        start_hour, start_minute = (int(part) for part in start.split(':'))
        end_hour, end_minute = (int(part) for part in end.split(':'))
        if start_hour * 60 + start_minute >= end_hour * 60 + end_minute:
            result.errors.append("Start time must be before end time")
    
    return result


def validate_task(data: Dict[str, Any]) -> ValidationResult:
    """Check raw task data before it is turned into a Task."""
    result = ValidationResult()
    
    title = data.get('title') or ''
    if not isinstance(title, str):
        result.errors.append("Task title must be a string")
    elif not title.strip():
        result.errors.append("Task title is required")
    elif len(title.strip()) > MAX_TITLE_LENGTH:
        result.errors.append(f"Task title must not exceed {MAX_TITLE_LENGTH} characters")
    elif len(title.strip()) < MIN_TITLE_LENGTH:
        result.errors.append(f"Task title must be at least {MIN_TITLE_LENGTH} characters")
    
    description = data.get('description')
    if description and not isinstance(description, str):
        result.errors.append("Description must be a string")
    elif description and len(description) > MAX_DESCRIPTION_LENGTH:
        result.errors.append(f"Description must not exceed {MAX_DESCRIPTION_LENGTH} characters")
    
    if data.get('priority') not in PRIORITIES:
        result.errors.append(f"Invalid priority: {data.get('priority')!r}")
    
    status = data.get('status', 'todo')
    if status not in STATUSES:
        result.errors.append(f"Invalid status: {status!r}")
    
    estimated = data.get('estimated_minutes', data.get('estimatedMinutes'))
    if estimated is not None:
        if not isinstance(estimated, int) or isinstance(estimated, bool):
            result.errors.append("Estimated minutes must be an integer")
        elif estimated < 1:
            result.errors.append("Estimated minutes must be at least 1")
        elif estimated > MAX_ESTIMATED_MINUTES:
            result.errors.append(f"Estimated minutes must not exceed {MAX_ESTIMATED_MINUTES}")
    
    return result
