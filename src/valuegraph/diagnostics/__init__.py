"""Diagnostic system for valuegraph errors.

Provides structured error diagnostics with codes and hints.

Python 3.11+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import MaxLinesExceededError, StateError, UsageError, ValueGraphError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "MaxLinesExceededError",
    "StateError",
    "UsageError",
    "ValueGraphError",
]
