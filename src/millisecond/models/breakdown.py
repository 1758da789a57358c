"""Duration breakdown value object."""

import operator
from dataclasses import dataclass
from typing import Any, Tuple

from ..exceptions import InvalidInputError
from ..utils.logging import TRACE_LEVEL, get_logger
from ..utils.time_format import join_long, join_short, to_ascii
from .part import DurationPart, TimeUnit

logger = get_logger(__name__)

_UNITS = tuple(TimeUnit)


def _check_count(value: Any, unit: TimeUnit) -> int:
    """Ensure value is a non-negative integer count of unit.

    Any type implementing __index__ (e.g. numpy integers) is accepted and
    converted to a plain int.
    """
    try:
        count = None if isinstance(value, bool) else operator.index(value)
    except TypeError:
        count = None

    if count is None:
        logger.error(
            f"Rejected {unit.field_name} count of type {type(value).__name__}: "
            f"{value!r}"
        )
        raise InvalidInputError(
            f"{unit.field_name} must be an integer",
            {"unit": unit.field_name, "value": value},
        )
    if count < 0:
        logger.error(f"Rejected negative {unit.field_name} count: {count}")
        raise InvalidInputError(
            f"{unit.field_name} must be non-negative",
            {"unit": unit.field_name, "value": value},
        )
    return count


@dataclass(frozen=True)
class DurationBreakdown:
    """A duration decomposed into years, days, hours and smaller units.

    Years are fixed 365-day periods and never wrap. Every other field is
    bounded by the size of the next coarser unit, so days < 365,
    hours < 24, minutes < 60, seconds < 60 and each sub-second field < 1000.

    Example:
        >>> d = DurationBreakdown.from_millis(33023448000)
        >>> str(d)
        '1y 17d 5h 10m 48s'
        >>> d.to_long_string()
        '1 year, 17 days, 5 hours, 10 minutes, 48 seconds'
    """

    years: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    millis: int = 0
    micros: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        """Validate field ranges after initialization."""
        for unit in _UNITS:
            value = _check_count(getattr(self, unit.field_name), unit)
            object.__setattr__(self, unit.field_name, value)

            limit = unit.per_coarser
            if limit is not None and value >= limit:
                logger.error(
                    f"DurationBreakdown validation failed: {unit.field_name}="
                    f"{value} is not below {limit}"
                )
                raise InvalidInputError(
                    f"{unit.field_name} must be less than {limit}",
                    {"unit": unit.field_name, "value": value},
                )

    @classmethod
    def _split(cls, value: int, unit: TimeUnit) -> "DurationBreakdown":
        """Decompose a count of unit by carrying into coarser units."""
        value = _check_count(value, unit)

        fields = {}
        carry = value
        for current in reversed(_UNITS[1 : _UNITS.index(unit) + 1]):
            carry, fields[current.field_name] = divmod(carry, current.per_coarser)
        fields[TimeUnit.YEARS.field_name] = carry

        breakdown = cls(**fields)
        if logger.isEnabledFor(TRACE_LEVEL):
            logger.trace(  # type: ignore[attr-defined]
                f"Split {value} {unit.field_name} into {breakdown!r}"
            )
        return breakdown

    @classmethod
    def from_nanos(cls, nanos: int) -> "DurationBreakdown":
        """Create a breakdown from nanoseconds.

        Example:
            >>> DurationBreakdown.from_nanos(1_800)
            DurationBreakdown(years=0, days=0, hours=0, minutes=0, seconds=0, millis=0, micros=1, nanos=800)

        Raises:
            InvalidInputError: If nanos is negative or not an integer
        """
        return cls._split(nanos, TimeUnit.NANOSECONDS)

    @classmethod
    def from_micros(cls, micros: int) -> "DurationBreakdown":
        """Create a breakdown from microseconds."""
        return cls._split(micros, TimeUnit.MICROSECONDS)

    @classmethod
    def from_millis(cls, millis: int) -> "DurationBreakdown":
        """Create a breakdown from milliseconds."""
        return cls._split(millis, TimeUnit.MILLISECONDS)

    @classmethod
    def from_seconds(cls, seconds: int) -> "DurationBreakdown":
        """Create a breakdown from whole seconds."""
        return cls._split(seconds, TimeUnit.SECONDS)

    @classmethod
    def from_minutes(cls, minutes: int) -> "DurationBreakdown":
        """Create a breakdown from whole minutes."""
        return cls._split(minutes, TimeUnit.MINUTES)

    @classmethod
    def from_hours(cls, hours: int) -> "DurationBreakdown":
        """Create a breakdown from whole hours."""
        return cls._split(hours, TimeUnit.HOURS)

    @classmethod
    def from_days(cls, days: int) -> "DurationBreakdown":
        """Create a breakdown from whole days."""
        return cls._split(days, TimeUnit.DAYS)

    @classmethod
    def from_years(cls, years: int) -> "DurationBreakdown":
        """Create a breakdown from whole 365-day years."""
        return cls._split(years, TimeUnit.YEARS)

    @property
    def parts(self) -> Tuple[DurationPart, ...]:
        """Nonzero components, most significant first."""
        return tuple(
            DurationPart(unit, getattr(self, unit.field_name))
            for unit in _UNITS
            if getattr(self, unit.field_name)
        )

    @property
    def is_zero(self) -> bool:
        """Check if every field is zero."""
        return not self.parts

    @property
    def total_nanoseconds(self) -> int:
        """Total length of the duration in nanoseconds."""
        total = self.years
        for unit in _UNITS[1:]:
            total = total * unit.per_coarser + getattr(self, unit.field_name)
        return total

    def to_short_string(self, ascii_only: bool = False) -> str:
        """Render as space-separated symbols, e.g. "2d 5m".

        Args:
            ascii_only: Transliterate the output to ASCII ("µs" becomes "us")

        Returns:
            Formatted string, "0s" for a zero duration
        """
        rendered = join_short(part.to_short_string() for part in self.parts)
        return to_ascii(rendered) if ascii_only else rendered

    def to_long_string(self, ascii_only: bool = False) -> str:
        """Render as comma-separated words, e.g. "2 days, 5 minutes".

        Args:
            ascii_only: Transliterate the output to ASCII

        Returns:
            Formatted string, "0 seconds" for a zero duration
        """
        rendered = join_long(part.to_long_string() for part in self.parts)
        return to_ascii(rendered) if ascii_only else rendered

    def __str__(self) -> str:
        return self.to_short_string()
