"""Time units and the single-unit parts a breakdown is made of."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions import InvalidInputError
from ..utils.time_format import pluralize


class TimeUnit(Enum):
    """Units of a duration breakdown, most significant first.

    The value of each member is the name of the matching DurationBreakdown
    field.
    """

    YEARS = "years"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "millis"
    MICROSECONDS = "micros"
    NANOSECONDS = "nanos"

    @property
    def field_name(self) -> str:
        """Name of the breakdown field holding this unit."""
        return self.value

    @property
    def symbol(self) -> str:
        """Short-form suffix (e.g., "h")."""
        return _SYMBOLS[self]

    @property
    def word(self) -> str:
        """Singular long-form word (e.g., "hour")."""
        return _WORDS[self]

    @property
    def per_coarser(self) -> Optional[int]:
        """How many of this unit make one of the next coarser unit.

        None for years, which never wrap.
        """
        return _PER_COARSER[self]


_SYMBOLS = {
    TimeUnit.YEARS: "y",
    TimeUnit.DAYS: "d",
    TimeUnit.HOURS: "h",
    TimeUnit.MINUTES: "m",
    TimeUnit.SECONDS: "s",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.MICROSECONDS: "µs",
    TimeUnit.NANOSECONDS: "ns",
}

_WORDS = {
    TimeUnit.YEARS: "year",
    TimeUnit.DAYS: "day",
    TimeUnit.HOURS: "hour",
    TimeUnit.MINUTES: "minute",
    TimeUnit.SECONDS: "second",
    TimeUnit.MILLISECONDS: "millisecond",
    TimeUnit.MICROSECONDS: "microsecond",
    TimeUnit.NANOSECONDS: "nanosecond",
}

_PER_COARSER = {
    TimeUnit.YEARS: None,
    TimeUnit.DAYS: 365,
    TimeUnit.HOURS: 24,
    TimeUnit.MINUTES: 60,
    TimeUnit.SECONDS: 60,
    TimeUnit.MILLISECONDS: 1000,
    TimeUnit.MICROSECONDS: 1000,
    TimeUnit.NANOSECONDS: 1000,
}


@dataclass(frozen=True)
class DurationPart:
    """A single nonzero component of a breakdown, such as 5 hours."""

    unit: TimeUnit
    value: int

    def __post_init__(self) -> None:
        """Validate the part after initialization."""
        if self.value <= 0:
            raise InvalidInputError(
                "part value must be positive",
                {"unit": self.unit.field_name, "value": self.value},
            )

    def to_short_string(self) -> str:
        """Render as value and symbol, e.g. "5h"."""
        return f"{self.value}{self.unit.symbol}"

    def to_long_string(self) -> str:
        """Render as value and pluralized word, e.g. "5 hours"."""
        return pluralize(self.value, self.unit.word)

    def __str__(self) -> str:
        return self.to_short_string()
