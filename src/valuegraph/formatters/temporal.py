"""Strategy for dates, times and durations.

Dates and datetimes are formatted with CLDR patterns through Babel, using
the invariant ``en`` locale so output does not depend on the environment:

    datetime(2016, 5, 23, 10, 45, 12)         -> <2016-05-23 10:45:12>
    datetime(..., microsecond=500000)         -> <2016-05-23 10:45:12.500000>
    datetime(..., tzinfo=timezone(+2h))       -> <2016-05-23 10:45:12 +02:00>
    date(2016, 5, 23)                         -> <2016-05-23>
    time(10, 45, 12)                          -> <10:45:12>
    timedelta(days=1, hours=2, minutes=3)     -> <1d, 2h, 3m>

Python 3.11+.
"""

from __future__ import annotations

import datetime
from typing import TYPE_CHECKING

from babel.dates import format_date, format_datetime

if TYPE_CHECKING:
    from valuegraph.layout.graph import RenderedGraph
    from valuegraph.runtime.options import FormattingContext

    from .base import FormatChild

__all__ = ["TemporalFormatter", "format_timedelta"]

_LOCALE = "en"
_DATE_PATTERN = "yyyy-MM-dd"
_TIME_PATTERN = "HH:mm:ss"
_OFFSET_PATTERN = "xxx"


def _datetime_text(value: datetime.datetime) -> str:
    text = format_datetime(value, f"{_DATE_PATTERN} {_TIME_PATTERN}", locale=_LOCALE)
    if value.microsecond:
        text += f".{value.microsecond:06d}"
    if value.utcoffset() is not None:
        text += " " + format_datetime(value, _OFFSET_PATTERN, locale=_LOCALE)
    return text


def format_timedelta(value: datetime.timedelta) -> str:
    """Compact duration text such as ``1d, 2h, 3m, 4s, 5ms``.

    Zero components are omitted; a zero duration is ``0s``. Negative
    durations are prefixed with ``-``.
    """
    sign = "-" if value < datetime.timedelta(0) else ""
    remaining = abs(value)
    hours, rest = divmod(remaining.seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    milliseconds, microseconds = divmod(remaining.microseconds, 1000)

    parts = [
        f"{amount}{unit}"
        for amount, unit in (
            (remaining.days, "d"),
            (hours, "h"),
            (minutes, "m"),
            (seconds, "s"),
            (milliseconds, "ms"),
            (microseconds, "µs"),
        )
        if amount
    ]
    return sign + (", ".join(parts) if parts else "0s")


class TemporalFormatter:
    """Renders datetimes, dates, times and timedeltas in angle brackets."""

    def can_handle(self, value: object) -> bool:
        return isinstance(value, (datetime.date, datetime.time, datetime.timedelta))

    def format(
        self,
        value: object,
        graph: RenderedGraph,
        context: FormattingContext,
        format_child: FormatChild,
    ) -> None:
        match value:
            case datetime.datetime():
                text = _datetime_text(value)
            case datetime.date():
                text = format_date(value, _DATE_PATTERN, locale=_LOCALE)
            case datetime.time():
                text = value.isoformat()
            case datetime.timedelta():
                text = format_timedelta(value)
            case _:
                text = repr(value)
        graph.add_fragment(f"<{text}>")
