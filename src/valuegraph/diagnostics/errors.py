"""valuegraph exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic for rich error information.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "MaxLinesExceededError",
    "StateError",
    "UsageError",
    "ValueGraphError",
]


class ValueGraphError(Exception):
    """Base exception for all valuegraph errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ValueGraphError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UsageError(ValueGraphError):
    """Formatting contract violated by the caller or a strategy.

    Examples:
    - format() invoked again while a render is in progress
    - format_child() called with a blank label
    - Unregistering a formatter that was never registered
    """


class StateError(ValueGraphError):
    """Query made while an object is in the wrong state.

    Raised by LookaheadSequence when is_empty or current is read before
    the first advance, or current after exhaustion.
    """


class MaxLinesExceededError(ValueGraphError):
    """Output grew past the configured line cap.

    Raised by the line store after it appended the overflow notice.
    The top-level format call absorbs it and returns the partial output.

    Attributes:
        max_lines: The cap that was exceeded
    """

    def __init__(self, message: str | Diagnostic, *, max_lines: int) -> None:
        """Initialize MaxLinesExceededError.

        Args:
            message: Error message string OR Diagnostic object
            max_lines: The cap that was exceeded
        """
        super().__init__(message)
        self.max_lines = max_lines
