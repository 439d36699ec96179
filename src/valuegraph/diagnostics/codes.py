"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.11+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Usage errors (contract violations by strategy authors)
        2000-2999: State errors (queries made in the wrong state)
        3000-3999: Limit errors (configured bounds reached)
        4000-4999: Registry errors (formatter registration)
    """

    # Usage errors (1000-1999)
    REENTRANT_FORMAT = 1001
    BLANK_CHILD_LABEL = 1002
    INVALID_SPLIT_INDEX = 1003

    # State errors (2000-2999)
    LOOKAHEAD_NOT_STARTED = 2001
    LOOKAHEAD_EXHAUSTED = 2002

    # Limit errors (3000-3999)
    MAX_LINES_EXCEEDED = 3001

    # Registry errors (4000-4999)
    FORMATTER_NOT_REGISTERED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        path: Graph path at the time of the error, root first
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    path: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[BLANK_CHILD_LABEL]: Child label must not be blank
              = path: root.0
              = help: Pass a short name such as the index or member name

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.path:
            lines.append(f"  = path: {'.'.join(self.path)}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
