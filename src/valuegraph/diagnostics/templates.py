"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def reentrant_format() -> Diagnostic:
        """format() entered while another render is active in this context.

        Returns:
            Diagnostic for REENTRANT_FORMAT
        """
        return Diagnostic(
            code=DiagnosticCode.REENTRANT_FORMAT,
            message="format() must not be called while a render is in progress",
            hint="Render nested values through the format_child callable",
        )

    @staticmethod
    def blank_child_label(path: tuple[str, ...]) -> Diagnostic:
        """Child render requested with an empty or whitespace label.

        Args:
            path: Labels of the active path, root first

        Returns:
            Diagnostic for BLANK_CHILD_LABEL
        """
        return Diagnostic(
            code=DiagnosticCode.BLANK_CHILD_LABEL,
            message="Child label must not be blank",
            hint="Pass a short name such as the index or member name",
            path=path,
        )

    @staticmethod
    def invalid_split_index(index: int, length: int) -> Diagnostic:
        """Line split at an offset outside its content.

        Args:
            index: The requested offset
            length: Content length of the line

        Returns:
            Diagnostic for INVALID_SPLIT_INDEX
        """
        msg = f"Split index {index} is outside the line content (length {length})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SPLIT_INDEX,
            message=msg,
        )

    @staticmethod
    def lookahead_not_started(attribute: str) -> Diagnostic:
        """Lookahead queried before the first advance.

        Args:
            attribute: Name of the queried attribute

        Returns:
            Diagnostic for LOOKAHEAD_NOT_STARTED
        """
        msg = f"'{attribute}' is undefined before the first advance()"
        return Diagnostic(
            code=DiagnosticCode.LOOKAHEAD_NOT_STARTED,
            message=msg,
            hint="Call advance() before reading the sequence state",
        )

    @staticmethod
    def lookahead_exhausted() -> Diagnostic:
        """Lookahead current read after the sequence ended.

        Returns:
            Diagnostic for LOOKAHEAD_EXHAUSTED
        """
        return Diagnostic(
            code=DiagnosticCode.LOOKAHEAD_EXHAUSTED,
            message="'current' is undefined after the sequence is exhausted",
            hint="Stop iterating once advance() returns False",
        )

    @staticmethod
    def max_lines_exceeded(max_lines: int) -> Diagnostic:
        """Output exceeded the configured line cap.

        Args:
            max_lines: The configured cap

        Returns:
            Diagnostic for MAX_LINES_EXCEEDED
        """
        msg = f"Output exceeded the maximum of {max_lines} lines"
        return Diagnostic(
            code=DiagnosticCode.MAX_LINES_EXCEEDED,
            message=msg,
            hint="Increase max_lines in FormattingOptions",
        )

    @staticmethod
    def formatter_not_registered(formatter_name: str) -> Diagnostic:
        """Unregister called for a formatter that is not registered.

        Args:
            formatter_name: Type name of the formatter

        Returns:
            Diagnostic for FORMATTER_NOT_REGISTERED
        """
        msg = f"Formatter '{formatter_name}' is not registered"
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NOT_REGISTERED,
            message=msg,
            hint="Only formatters added through register() can be removed",
        )

    @staticmethod
    def registry_frozen() -> str:
        """Registration attempted on a frozen registry.

        Returns:
            Plain message for the TypeError raised by the registry
        """
        return (
            "Cannot modify frozen registry. "
            "Use create_default_registry() to get a mutable registry."
        )
