"""Time formatting utilities."""

from typing import Iterable

from unidecode import unidecode

SHORT_SEPARATOR = " "
LONG_SEPARATOR = ", "

# An all-zero duration is rendered in seconds
ZERO_SHORT = "0s"
ZERO_LONG = "0 seconds"


def pluralize(value: int, word: str) -> str:
    """Render a count with its unit word, pluralized unless the count is 1.

    Args:
        value: The count
        word: Singular unit word (e.g., "year")

    Returns:
        Formatted string (e.g., "1 year", "2 years", "0 years")
    """
    if value == 1:
        return f"{value} {word}"
    return f"{value} {word}s"


def join_short(parts: Iterable[str]) -> str:
    """Join short-form parts, falling back to the zero string when empty."""
    rendered = SHORT_SEPARATOR.join(parts)
    return rendered or ZERO_SHORT


def join_long(parts: Iterable[str]) -> str:
    """Join long-form parts, falling back to the zero string when empty."""
    rendered = LONG_SEPARATOR.join(parts)
    return rendered or ZERO_LONG


def to_ascii(text: str) -> str:
    """Transliterate rendered text to ASCII (e.g., "5µs" becomes "5us")."""
    return unidecode(text)
