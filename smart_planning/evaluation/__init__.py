"""Sample data generation."""

from .generator import TaskGenerator

__all__ = ['TaskGenerator']
