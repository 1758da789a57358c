"""One-call duration formatting for CLIs, logs and UIs.

Example:
    >>> from millisecond import format_duration
    >>> format_duration(33023448000)
    '1y 17d 5h 10m 48s'
    >>> format_duration(90, unit="s", style="long")
    '1 minute, 30 seconds'
"""

from typing import Callable, Dict, Optional

from .config.settings import VALID_STYLES, Settings
from .exceptions import InvalidInputError
from .models.breakdown import DurationBreakdown
from .utils.logging import get_logger

logger = get_logger(__name__)

_CONSTRUCTORS: Dict[str, Callable[[int], DurationBreakdown]] = {
    "ns": DurationBreakdown.from_nanos,
    "nanos": DurationBreakdown.from_nanos,
    "nanoseconds": DurationBreakdown.from_nanos,
    "us": DurationBreakdown.from_micros,
    "µs": DurationBreakdown.from_micros,
    "micros": DurationBreakdown.from_micros,
    "microseconds": DurationBreakdown.from_micros,
    "ms": DurationBreakdown.from_millis,
    "millis": DurationBreakdown.from_millis,
    "milliseconds": DurationBreakdown.from_millis,
    "s": DurationBreakdown.from_seconds,
    "seconds": DurationBreakdown.from_seconds,
    "m": DurationBreakdown.from_minutes,
    "minutes": DurationBreakdown.from_minutes,
    "h": DurationBreakdown.from_hours,
    "hours": DurationBreakdown.from_hours,
    "d": DurationBreakdown.from_days,
    "days": DurationBreakdown.from_days,
    "y": DurationBreakdown.from_years,
    "years": DurationBreakdown.from_years,
}


def breakdown_for(value: int, unit: str = "ms") -> DurationBreakdown:
    """Build a breakdown from a count of the named unit.

    Args:
        value: Non-negative integer count
        unit: Unit symbol or name ("ns", "us", "ms", "s", "m", "h", "d", "y",
            or "nanoseconds", "millis", ...)

    Raises:
        InvalidInputError: If the unit is unknown or value is invalid
    """
    constructor = _CONSTRUCTORS.get(unit.strip().lower())
    if constructor is None:
        logger.error(f"Unknown duration unit: {unit!r}")
        raise InvalidInputError(f"Unknown duration unit: {unit}", {"unit": unit})
    return constructor(value)


def format_duration(
    value: int,
    unit: str = "ms",
    style: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Format a raw duration as a human-readable string.

    Args:
        value: Non-negative integer count of unit
        unit: Unit of value (see breakdown_for)
        style: "short" or "long"; defaults to settings.default_style
        settings: Rendering settings; loaded from the environment if None

    Returns:
        Formatted duration string (e.g., "1h 23m 45s")

    Raises:
        InvalidInputError: If value, unit or style is invalid
    """
    if settings is None:
        settings = Settings()

    style = (style or settings.default_style).lower()
    if style not in VALID_STYLES:
        logger.error(f"Unknown duration style: {style!r}")
        raise InvalidInputError(f"Unknown duration style: {style}", {"style": style})

    breakdown = breakdown_for(value, unit)
    if style == "long":
        return breakdown.to_long_string(ascii_only=settings.ascii_only)
    return breakdown.to_short_string(ascii_only=settings.ascii_only)
