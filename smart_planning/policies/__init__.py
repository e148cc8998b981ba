"""Scheduling policy implementations."""

from .base import SchedulingPolicy
from .smart import SmartPolicy

__all__ = ['SchedulingPolicy', 'SmartPolicy']
