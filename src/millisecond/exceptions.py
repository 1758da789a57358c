"""Common exception classes for millisecond.

All errors raised by the package derive from MillisecondError, which carries
an optional context dictionary for debugging and error reporting.
"""

from typing import Any, Dict, Optional


class MillisecondError(Exception):
    """Base exception for all millisecond errors.

    Attributes:
        context: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Initialize the error.

        Args:
            message: The error message
            context: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        base_message = super().__str__()
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base_message} (context: {context_str})"
        return base_message


class InvalidInputError(MillisecondError, ValueError):
    """Raised when a duration cannot be built from the given input.

    Covers negative counts, non-integer counts, out-of-range breakdown
    fields and unknown unit or style names.
    """

    pass
