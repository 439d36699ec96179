"""Built-in formatting strategies.

Order matters: the registry consults strategies first to last and the
first that can handle a value renders it. DefaultFormatter accepts every
value and therefore comes last.

Python 3.11+.
"""

from .base import FormatChild, ValueFormatter, type_name, write_text
from .default import DefaultFormatter, safe_repr
from .exceptions import ExceptionFormatter
from .mapping import MappingFormatter
from .members import DataclassFormatter
from .scalars import EnumFormatter, NoneFormatter, StringFormatter
from .sequence import SequenceFormatter
from .temporal import TemporalFormatter, format_timedelta

__all__ = [
    "DataclassFormatter",
    "DefaultFormatter",
    "EnumFormatter",
    "ExceptionFormatter",
    "FormatChild",
    "MappingFormatter",
    "NoneFormatter",
    "SequenceFormatter",
    "StringFormatter",
    "TemporalFormatter",
    "ValueFormatter",
    "builtin_formatters",
    "format_timedelta",
    "safe_repr",
    "type_name",
    "write_text",
]


def builtin_formatters() -> list[ValueFormatter]:
    """Fresh instances of the built-in strategies in lookup order."""
    return [
        NoneFormatter(),
        StringFormatter(),
        EnumFormatter(),
        TemporalFormatter(),
        ExceptionFormatter(),
        DataclassFormatter(),
        MappingFormatter(),
        SequenceFormatter(),
        DefaultFormatter(),
    ]
