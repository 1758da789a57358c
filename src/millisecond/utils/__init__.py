"""Utility functions for millisecond."""

from .logging import (
    TRACE_LEVEL,
    JSONFormatter,
    get_logger,
    setup_logging,
)
from .time_format import (
    ZERO_LONG,
    ZERO_SHORT,
    join_long,
    join_short,
    pluralize,
    to_ascii,
)

__all__ = [
    # Logging utilities
    "TRACE_LEVEL",
    "JSONFormatter",
    "get_logger",
    "setup_logging",
    # Time formatting utilities
    "ZERO_LONG",
    "ZERO_SHORT",
    "join_long",
    "join_short",
    "pluralize",
    "to_ascii",
]
