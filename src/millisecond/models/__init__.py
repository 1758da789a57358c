"""Duration data models."""

from .breakdown import DurationBreakdown
from .part import DurationPart, TimeUnit

__all__ = [
    "DurationBreakdown",
    "DurationPart",
    "TimeUnit",
]
