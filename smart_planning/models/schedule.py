"""Time slot and schedule output models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Union

from .task import Task

SLOT_TYPES = ('focus', 'break', 'meeting', 'flexible')


@dataclass(frozen=True)
class TimeSlot:
    """A block of wall-clock time within a single day."""
    
    start: str  # "09:00"
    end: str    # "10:30"
    duration: int
    type: str = 'focus'
    energy_required: str = 'high'
    
    @property
    def start_hour(self) -> int:
        """Hour of day the slot starts in."""
        return int(self.start.split(':')[0])
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {
            'start': self.start,
            'end': self.end,
            'duration': self.duration,
            'type': self.type,
            'energyRequired': self.energy_required,
        }


@dataclass
class ScheduledTask:
    """A task bound to a concrete slot on the target day."""
    
    task: Task
    scheduled_start: datetime
    scheduled_end: datetime
    time_slot: TimeSlot
    ai_reason: str
    
    def to_dict(self) -> Dict[str, Any]:
        """Task fields extended with the placement."""
        data = self.task.to_dict()
        data.update({
            'scheduledStart': self.scheduled_start.isoformat(),
            'scheduledEnd': self.scheduled_end.isoformat(),
            'timeSlot': self.time_slot.to_dict(),
            'aiReason': self.ai_reason,
        })
        return data


@dataclass
class ProductivityAnalysis:
    """Score and text produced from a day's completed tasks."""
    
    score: int
    insights: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {
            'score': self.score,
            'insights': list(self.insights),
            'recommendations': list(self.recommendations),
        }


@dataclass
class SmartSchedule:
    """A day's plan plus the productivity analysis that accompanies it."""
    
    date: Union[date, datetime]
    slots: List[ScheduledTask]
    productivity_score: int
    recommendations: List[str]
    insights: List[str] = field(default_factory=list)
    unscheduled: List[Task] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert schedule to dictionary for JSON export."""
        return {
            'date': self.date.isoformat(),
            'slots': [scheduled.to_dict() for scheduled in self.slots],
            'productivity_score': self.productivity_score,
            'recommendations': list(self.recommendations),
            'insights': list(self.insights),
            'unscheduled': [task.to_dict() for task in self.unscheduled],
            'summary': dict(self.summary),
        }
    
    def to_human_readable(self) -> str:
        """Generate human-readable report."""
        lines = [
            f"=== Schedule for {self.date.isoformat()} ===",
            f"Productivity score: {self.productivity_score}",
            "",
            "Scheduled Tasks:",
        ]
        
        if not self.slots:
            lines.append("  (none)")
        
        for scheduled in self.slots:
            slot = scheduled.time_slot
            lines.append(f"  {slot.start}-{slot.end} [{scheduled.task.priority}] {scheduled.task.title}")
            lines.append(f"    Estimate: {scheduled.task.get_estimated_minutes()} min, slot: {slot.duration} min")
            lines.append(f"    Reason: {scheduled.ai_reason}")
        
        if self.unscheduled:
            lines.extend(["", "Not Scheduled Today:"])
            for task in self.unscheduled:
                lines.append(f"  [{task.priority}] {task.title} ({task.get_estimated_minutes()} min)")
        
        if self.insights:
            lines.extend(["", "Insights:"])
            lines.extend(f"  {insight}" for insight in self.insights)
        
        lines.extend(["", "Recommendations:"])
        lines.extend(f"  {recommendation}" for recommendation in self.recommendations)
        
        lines.extend(["", "Summary Statistics:"])
        for key, value in self.summary.items():
            lines.append(f"  {key}: {value}")
        
        lines.append("=" * 50)
        
        return "\n".join(lines)
