"""Human-readable duration breakdowns.

Converts a raw count of milliseconds, microseconds or nanoseconds into
years, days, hours, minutes, seconds and sub-second parts, e.g. 33023448000
milliseconds becomes "1y 17d 5h 10m 48s".
"""

from .config import ConfigurationError, Settings, load_settings
from .exceptions import InvalidInputError, MillisecondError
from .formatting import breakdown_for, format_duration
from .models import DurationBreakdown, DurationPart, TimeUnit

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DurationBreakdown",
    "DurationPart",
    "InvalidInputError",
    "MillisecondError",
    "Settings",
    "TimeUnit",
    "breakdown_for",
    "format_duration",
    "load_settings",
]
