"""Trigger strategies for job scheduling."""

from cronpattern.core.triggers.base import TriggerStrategy
from cronpattern.core.triggers.pattern import PatternTrigger

__all__ = [
    "TriggerStrategy",
    "PatternTrigger",
]
