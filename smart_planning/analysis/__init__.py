"""Productivity analysis."""

from .productivity import analyze_productivity_and_suggest

__all__ = ['analyze_productivity_and_suggest']
